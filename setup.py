from setuptools import find_packages, setup

package_name = 'fabrik2d'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test', 'tests']),
    install_requires=[
        'setuptools',
        'numpy',
    ],
    zip_safe=True,
    maintainer='yuuki',
    maintainer_email='yuuzena@gmail.com',
    description='FABRIK inverse kinematics solver for planar chains of fixed-length segments',
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
