# Copyright 2016-2026, Pulumi Corporation.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""A Pulumi dynamic provider for Checkly."""

import os
import re

from setuptools import find_packages, setup


def version():
    # The package version is kept in pulumi_checkly/_version.py only.
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'pulumi_checkly', '_version.py')
    with open(path, encoding='utf-8') as f:
        match = re.search(r'^__version__ = "([^"]+)"$', f.read(), re.M)
    if match is None:
        raise RuntimeError(f'cannot find __version__ in {path}')
    return match.group(1)


def readme():
    try:
        with open('README.md', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return "Pulumi dynamic provider for Checkly - Development Version"


setup(name='pulumi-checkly',
      version=version(),
      description='A Pulumi dynamic provider for Checkly environment variables',
      long_description=readme(),
      long_description_content_type='text/markdown',
      license='Apache 2.0',
      packages=find_packages(include=("pulumi_checkly", "pulumi_checkly.*")),
      package_data={
          'pulumi_checkly': [
              'py.typed'
          ]
      },
      python_requires='>=3.9',
      install_requires=[
          'pulumi>=3.136.0,<4.0.0',
          'requests>=2.28',
          'semver>=2.13',
      ],
      extras_require={
          'test': [
              'pytest',
              'pytest-timeout',
              'dill',
          ],
      },
      zip_safe=False)
