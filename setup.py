# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='rangeframe',
  version='0.1.0',
  description='Range-frame SVG charts with nice-number axis layout, for Python 3.',
  python_requires='>=3.11',
  packages=['rangeframe', 'rangeframe.bin'],
  install_requires=['lxml'],
  extras_require={'test': ['pytest']},
  entry_points={'console_scripts': ['rangeframe=rangeframe.bin.rangeframe:main']},
)
