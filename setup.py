"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='stepwise-lambda',
	version='0.1.0',
	packages=['stepwise'],
	entry_points={
		'console_scripts': ["stepwise = stepwise.cmdline:main"],
	},
	license='MIT',
	description='A lambda-calculus evaluator that runs one small, bounded step at a time',
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
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
