# Log-normal distribution: densities, quantile search and moments

import logging

from lognormal.results import Result, ErrorKind, DistributionError
from lognormal.distributions import Normal, LogNormal, DEFAULT_SEARCH_PARAMETERS
from lognormal.root_finding import bisection, Bisection
from lognormal.reported_statistics import get_statistics

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = ['Result', 'ErrorKind', 'DistributionError', 'Normal', 'LogNormal', 'DEFAULT_SEARCH_PARAMETERS',
           'bisection', 'Bisection', 'get_statistics']
