import setuptools


with open('README.md', 'r') as fd:
    long_description = fd.read()

setuptools.setup(
    name='tagpages',
    version='0.1',
    author='Andrey Vlasovskikh',
    author_email='andrey.vlasovskikh@gmail.com',
    description='Tag index pages for Jekyll-style static site generators',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Topic :: Internet :: WWW/HTTP :: Site Management',
    ],
    packages=['tagpages'],
    python_requires='>=3.9',
    install_requires=['PyYAML', 'Jinja2', 'Markdown'],
    extras_require={
        'test': ['pytest'],
    })
