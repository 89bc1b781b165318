import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="notemanager",
    version="0.1.0",
    author="notemanager contributors",
    description="Fuzzy-find, edit and git-sync a directory of Markdown notes.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},
    entry_points={
        'console_scripts': [
            'notemanager = notemanager.cli:main'
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        'terminaltables',
    ],
    extras_require={
        'test': [
            'freezegun',
            'pyfakefs',
            'pytest',
            'pytest-mock',
        ],
    },
    python_requires='>=3.7',
)
