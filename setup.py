"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='tsimporter',
	author='Beth Kjos',
	author_email='kjosib@gmail.com',
	version='0.0.1',
	packages=['tsimporter', ],
	license='MIT',
	description='Turns TypeScript ambient declarations into Scala.js facade types',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Compilers",
		"Topic :: Software Development :: Code Generators",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
