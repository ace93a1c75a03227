"""Setup for IntervalTimer.

Install for development:
    pip install -e .[test]

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "IntervalTimer",
        "CFBundleDisplayName": "IntervalTimer",
        "CFBundleIdentifier": "com.intervaltimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

setup(
    app=APP,
    data_files=DATA_FILES,
    options={"py2app": OPTIONS},
    name="IntervalTimer",
    version="0.1.0",
    packages=find_packages(include=["intervaltimer", "intervaltimer.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "gui_scripts": ["intervaltimer = intervaltimer.__main__:main"],
    },
)
