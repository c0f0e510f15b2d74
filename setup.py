from setuptools import setup, find_packages

setup(
    name="reversi-engine",
    version="0.1",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        'numpy>=1.19.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': ['reversi=reversi.cli:main'],
    },
    python_requires='>=3.7',
)
