"""
Packaging script for PyPI.
"""
import setuptools
from pathlib import Path

readme = Path(__file__).parent / "README.md"

setuptools.setup(
	name='voicecalc',
	version='0.1.0',
	packages=['voicecalc'],
	entry_points={
		'console_scripts': ["voicecalc = voicecalc.cmdline:main"],
	},
	license='MIT',
	description='Evaluate arithmetic spoken in plain English, with proper operator precedence',
	long_description=readme.read_text(encoding="utf-8") if readme.exists() else "",
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Text Processing :: Linguistic",
		"Topic :: Scientific/Engineering :: Mathematics",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
		"word2number>=1.1",
	],
)
