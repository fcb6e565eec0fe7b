# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='xmlobj',
  version='0.1.0',
  description='Build markup documents from nested dictionaries and lists, render them to text, and extract them back.',
  python_requires='>=3.10',

  packages=['xmlobj', 'xmlobj.bin', 'utest'],
  install_requires=['lxml'],
  entry_points={'console_scripts': ['xmlobj=xmlobj.bin.xmlobj:main']},
)
