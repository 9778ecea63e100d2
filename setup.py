"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='blizzard-lang',
	version='0.1.0',
	packages=['blizzard'],
	license='MIT',
	description='The evaluation engine for Blizzard, a tiny language of typed declarations, arithmetic and WRITE',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
