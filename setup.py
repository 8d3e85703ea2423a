import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="typolite",
    version="0.1.0",
    description="Lightweight Hunspell-compatible spellchecker in pure Python",
    long_description=long_description,
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    extras_require={
        "test": ["pytest"]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",

        "License :: OSI Approved :: MIT License",

        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",

        "Operating System :: OS Independent",

        "Topic :: Text Processing :: Linguistic"
    ],
    python_requires='>=3.7',
    keywords=["hunspell", "spelling", "spellcheck", "suggest"]
)
