from setuptools import setup, find_packages

setup(
    name="import_sniff",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "rich>=13.0.0",
        "tomli>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'import-sniff=src.__main__:main',
        ],
    },
)
