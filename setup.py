from setuptools import setup, find_namespace_packages
from os import path

requires = [
    # tornado coroutines are recognized by the decorator form of the gauge contexts
    "tornado~=6.0",
]


# read the contents of your README file
this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

version = "1.0.0"

setup(
    version=version,
    python_requires=">=3.11",  # also update classifiers
    # Meta data
    name="promkit",
    description="Prometheus style metric primitives",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Inmanta",
    author_email="code@inmanta.com",
    license="Apache Software License 2",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Monitoring",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="metrics monitoring prometheus gauge instrumentation",
    # Packaging
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    zip_safe=False,
    include_package_data=True,
    install_requires=requires,
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
)
