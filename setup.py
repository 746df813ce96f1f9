from setuptools import setup, find_packages

setup(
    name="selectable_rows",
    version="0.1.0",
    packages=find_packages(include=["core", "core.*", "config", "config.*", "desktop_ui", "desktop_ui.*"]),
    install_requires=[
        "python-dotenv>=1.0.0",
        "PySide6>=6.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    python_requires=">=3.10",
)
