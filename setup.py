#!/usr/bin/env python

from setuptools import setup

def readme():
    with open('README.md') as f:
        return f.read()

setup(name='shape_skewness',
      version='0.1.0',
      description='Bootstrapped skewness of noisy periodic shapes',
      long_description=readme(),
      long_description_content_type='text/markdown',
      packages=['shape_skewness', 'shape_skewness.stats'],
      license='MIT',
      classifiers=[
          'Development Status :: 2 - Pre-Alpha',
          'Intended Audience :: Developers',
          'Intended Audience :: Science/Research',
          'License :: OSI Approved :: MIT License',
          'Topic :: Scientific/Engineering'
      ],
      keywords='bootstrap skewness waveform signal scientific',
      python_requires='>=3.8',
      install_requires=['numpy', 'scipy', 'pandas', 'matplotlib'],
      extras_require={'test': ['pytest']},
      entry_points={
          'console_scripts': ['shape-skewness=shape_skewness.cli:main'],
      },
)
