import io
import re

from setuptools import find_packages, setup

__version__ = re.search(
    r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
    io.open("polysched/version.py", encoding="utf_8_sig").read(),
).group(1)


setup(
    name="polysched",
    version=__version__,
    description="polysched computes approximately optimal repeating meeting schedules for weighted relationship networks.",
    long_description="""polysched computes approximately optimal repeating meeting schedules for weighted relationship networks,
using Vizing edge colouring of logarithmic weight layers (Polyamorous Scheduling).""",
    author="",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    zip_safe=False,
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "randomname",
        "numpy",
        "networkx",
        "dask",
        "pydantic>=2",
        "fire",
    ],
    extras_require={
        "plot": ["matplotlib"],
        "tests": ["pytest"],
    },
    entry_points={
        "console_scripts": ["polysched=polysched.__main__:main"],
    },
)
