import setuptools

setuptools.setup(
	name='charset-pattern',
	version='0.1.0',
	packages=[
		'charpattern',
		'charpattern.support',
	],
	description='Compact regular-expression fragments matching one character from a given set',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	extras_require={'test': ['pytest']},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
	],
)
