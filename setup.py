import pathlib
from setuptools import setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

main_ns = {}
with open(HERE / "igessurf" / "version.py") as ver_file:
    exec(ver_file.read(), main_ns)

# The text of the README file
with open((HERE / "README.md"), encoding="utf-8") as f:
    README = f.read()

# This call to setup() does all the work
setup(
    name="igessurf",
    version=main_ns['__version__'],
    description="Writes tensor-product B-spline surfaces to IGES files as Entity Type 128 "
                "(Rational B-Spline Surface)",
    long_description=README,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    packages=["igessurf", "igessurf.examples", "igessurf.tests"],
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
