from setuptools import setup, find_namespace_packages
import os

# Function to read the contents of your README file
def read_readme():
    return open(os.path.join(os.path.dirname(__file__), 'README.md')).read()

setup(
    name='pomodoro-deck',
    version='0.1.0',
    description='A keyboard-friendly Pomodoro timer for the desktop',
    long_description=read_readme() if os.path.exists('README.md') else '',
    long_description_content_type='text/markdown',
    packages=find_namespace_packages(include=['pomodoro_deck', 'pomodoro_deck.*']),
    include_package_data=True,
    python_requires='>=3.9',
    install_requires=[
        'PyQt6',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: POSIX :: Linux',
        'Environment :: X11 Applications :: Qt',
        'License :: OSI Approved :: MIT License',
        'Development Status :: 3 - Alpha',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Office/Business :: Scheduling',
    ],
    entry_points={
        'gui_scripts': [
            'pomodoro-deck = pomodoro_deck.main_qt:main',
        ],
    },
)
