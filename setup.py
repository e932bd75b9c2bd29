from setuptools import setup, find_packages


def get_description():
    return "Combinators for chaining and composing Python futures"


def get_long_description():
    text = open("README.md").read()

    # The README starts with the same text as "description",
    # which makes sense, but on PyPI causes same text to be
    # displayed twice.  So let's strip that.
    return text.replace(get_description() + ".\n\n", "", 1)


def get_install_requires():
    return open("requirements.in").readlines()


setup(
    name="more-futures",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"more_futures": ["*.pyi", "_impl/*.pyi", "_impl/futures/*.pyi"]},
    zip_safe=False,
    license="GNU General Public License",
    description=get_description(),
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    install_requires=get_install_requires(),
    extras_require={
        "prometheus": ["prometheus-client"],
        "test": ["pytest", "PyHamcrest", "prometheus-client"],
    },
)
