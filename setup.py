# setup.py
from setuptools import setup, find_packages

setup(
    name="companytree",
    version="1.0.0",
    description="Roll company travel costs up a parent/child hierarchy fetched from a JSON API",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.27",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        'console_scripts': [
            'companytree=companytree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
