#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# the package imports its dependencies on import, so the version is read from the source instead
_version_source = (Path(__file__).parent / 'leb128codec' / 'version.py').read_text()
BASE_VERSION = re.search(r"^BASE_VERSION = '([^']+)'", _version_source, re.MULTILINE).group(1)

install_requires = [
    'pydantic>=2,<3',
    'PyYAML>=6',
    'structlog>=23',
    'typing_extensions>=4.10',
]

setup(
    name='leb128codec',
    version=BASE_VERSION,
    description='LEB128 variable-length integer codec with fixed-width bounds',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.10',
    packages=find_packages(exclude=('leb128codec_tests', 'leb128codec_tests.*')),
    package_data={'leb128codec.conf': ['*.yml']},
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7'],
    },
)
