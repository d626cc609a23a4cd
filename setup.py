from setuptools import setup, find_packages


with open('requirements/prod.txt') as fp:
    requires = [
        line.strip() for line in fp.readlines()
        if line.strip() and not line.startswith('#')
    ]


setup(
    name='id3scan',
    version='1.0',
    description="Read the text frames of ID3v2 blocks.",
    long_description="""""",
    license="Apache License",
    packages=find_packages(exclude=['ez_setup']),
    install_requires=requires,
    extras_require={
        'test': ['mock', 'pytest'],
    },
    url='',
    include_package_data=True,
    entry_points="""
       [console_scripts]

       do_dump_tags = id3scan.do_dump_tags:main
       """,
    classifiers=[],
    )
