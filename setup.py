from setuptools import setup
from flagkit.const import VERSION_STR, DESCRIPTION

setup(
    name="flagkit",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["flagkit"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
