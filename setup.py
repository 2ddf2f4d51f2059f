# setup.py
from setuptools import setup, find_packages

setup(
    name="release-tracking",
    version="1.0.0",
    description="Measure release tree sizes and record snapshots to a Firebase Realtime Database",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.25",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'release-tracking=release_tracking.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
