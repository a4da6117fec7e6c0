"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from VERSION
with open(ver_file, 'r') as f:
    ver_line = f.read().strip()

verstr = re.match(r'^(\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)$', ver_line)
if verstr is None:
    raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')
__version__ = verstr.groups()[0]

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="equalgrid",
    version=__version__,
    author="",
    author_email="",
    description="Equal-area geodetic grid indexing for bounding boxes on the globe.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('equalgrid*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"equalgrid": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pydantic>=2,<3',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
