"""This module contains the setup for the logger used in the FunctionApproximators module.

Importing FunctionApproximators creates (or truncates) functionApproximators.log in the current
working directory.
"""
import logging

logging.basicConfig(
    filename='functionApproximators.log',
    filemode='w', # overwrite log file
    format='[%(asctime)s %(name)s] (%(levelname)s) %(message)s',
    # i.e. [2020-01-01 12:00:00 functionApproximators.gridData] (WARNING) Not overwriting file.
    datefmt='%Y-%m-%d %H:%M:%S',
    level=logging.DEBUG,
)

logger = logging.getLogger("functionApproximators")
