from setuptools import setup, find_packages

setup(
    name="unimath",
    version="0.1.0",
    description="UniMath for X11 — type \\alpha, get α: escape words to Unicode math symbols",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.9",
    install_requires=[
        "python-xlib",
        "PyQt5",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "unimath=unimath.main:main",
        ],
    },
)
