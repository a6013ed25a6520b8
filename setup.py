from setuptools import setup, find_packages
import re

# Read version from salaryreport/__init__.py
with open('salaryreport/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='salary-report',
    version=version,
    packages=find_packages(include=['salaryreport', 'salaryreport.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.5',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
            'mcp[cli]>=1.0.0,<2',
        ],
    },
    entry_points={
        'console_scripts': [
            'salary-report=salaryreport.cli.__main__:main',
            'salary-report-mcp=salaryreport.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Annual salary withholding breakdown: insurance, deductions, income tax and net pay.',
    python_requires='>=3.10',
)
