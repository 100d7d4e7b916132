import io
import os
import re
from setuptools import find_packages, setup


NAME = "randq"
AUTHOR = "randq developers"
URL = "https://github.com/randq/randq"
REQUIRES_PYTHON = ">=3.7.0"
DESCRIPTION = "Linked deque, randomized queue and reservoir sampling"

here = os.path.abspath(os.path.dirname(__file__))

with io.open(os.path.join(here, "randq/__init__.py"), "rt", encoding="utf8") as f:
    VERSION = re.search(r"__version__ = \"(.*?)\"", f.read()).group(1)

try:
    with io.open(os.path.join(here, "README.md"), encoding="utf-8") as f:
        LONG_DESCRIPTION = "\n" + f.read()
except FileNotFoundError:
    LONG_DESCRIPTION = DESCRIPTION


REQUIRED = [
    "click>=7.0",
    "numpy>=1.17.0",
]
EXTRA = {
    "test": ["pytest>=5.0", "scipy>=1.3"],
}


setup(
    name=NAME,
    version=VERSION,
    url=URL,
    project_urls={"Code": URL, "Issue tracker": URL + "/issues",},
    author=AUTHOR,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    python_requires=REQUIRES_PYTHON,
    install_requires=REQUIRED,
    extras_require=EXTRA,
    entry_points={"console_scripts": ["randq=randq.cli:run_cli"]},
    license="Apache2",
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
)
