import setuptools

import pyakismet

long_description = """
pyakismet is a client for the Akismet REST API, used to detect and filter
spam comments posted on weblogs. It works with any anti-spam service that
implements the Akismet API.
"""

classifiers = ["Operating System :: OS Independent",

               "Environment :: Web Environment",

               "Programming Language :: Python",
               "Programming Language :: Python :: 3",

               "Intended Audience :: Developers",

               "Topic :: Internet :: WWW/HTTP",
               "Topic :: Software Development :: Libraries :: Python Modules",

               "Development Status :: 5 - Production/Stable",

               "License :: OSI Approved :: MIT License",
               ]

setuptools.setup(
        name='pyakismet',
        version=pyakismet.__version__,
        description='client for the Akismet spam-filtering API',
        long_description=long_description,
        author='The pyakismet contributors',
        license='MIT',
        platforms='any',
        keywords='spam akismet',
        url='https://akismet.com/development/api/',
        packages=['pyakismet'],
        install_requires=['requests'],
        extras_require={
            'sentry': ['raven'],
            'test': ['mock', 'pytest'],
        },
        python_requires='>=3.6',
        classifiers=classifiers,
        test_suite="tests.suite",
)
