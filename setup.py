# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='dashy',
  version='0.0.1',
  description='Dashy is a small collection of lodash-style array utilities and a stack for Python 3.',
  python_requires='>=3.12',
  packages=['dashy', 'utest'],
  install_requires=['typing_extensions'],
)
