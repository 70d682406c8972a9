# coding: utf-8
# (c) Copyright IBM Corp. 2025

import re
from os import path

from setuptools import find_packages, setup

pwd = path.abspath(path.dirname(__file__))

# Import README.md into long_description
with open(path.join(pwd, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

# Read the version without importing the package and its dependencies
with open(path.join(pwd, "src", "lcu_auth", "version.py"), encoding="utf-8") as f:
    VERSION = re.search(r'^VERSION = "([^"]+)"', f.read(), re.M).group(1)


setup(name="lcu-auth",
      version=VERSION,
      license="MIT",
      description="Locate a running League Client and retrieve the credentials of its LCU API",
      package_dir={"": "src"},
      packages=find_packages(where="src", exclude=["tests"]),
      package_data={"lcu_auth": ["*.pem"]},
      long_description=long_description,
      long_description_content_type="text/markdown",
      zip_safe=False,
      python_requires=">=3.8",
      install_requires=["fysom>=2.1.2",
                        "PyYAML>=5.1",
                        "requests>=2.6.0",
                        "urllib3>=1.26.5"],
      extras_require={
          "test": ["mock>=4.0",
                   "pytest>=7.0",
                   "pytest-mock>=3.10"],
      },
      entry_points={
          "console_scripts": ["lcu-auth = lcu_auth.__main__:main"],
      },
      keywords=["league-of-legends", "lcu", "league-client", "riot-games"],
      classifiers=[
          "Development Status :: 5 - Production/Stable",
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Operating System :: Microsoft :: Windows",
          "Operating System :: MacOS",
          "Operating System :: POSIX :: Linux",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Programming Language :: Python :: 3.8",
          "Programming Language :: Python :: 3.9",
          "Programming Language :: Python :: 3.10",
          "Programming Language :: Python :: 3.11",
          "Programming Language :: Python :: 3.12",
          "Topic :: Games/Entertainment",
          "Topic :: Software Development :: Libraries :: Python Modules"])
