# setup.py
from setuptools import setup, find_packages

setup(
    name="disktrace",
    version="1.0.0",
    description="Rebuild directory trees from shell transcripts and report directory sizes",
    author="disktrace maintainers",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["disktrace", "disktrace.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'disktrace=disktrace.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
