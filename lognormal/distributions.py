# Normal and log-normal cdf-s, pdf-s and moments

# DEPENDENCIES
import logging
import numpy as np
from scipy import special
from lognormal.results import Result, ErrorKind
from lognormal.root_finding import bisection, check_bracket

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_PARAMETERS = {'lower_bound':-16.0, 'upper_bound':16.0, 'tolerance':1e-7, 'max_iterations':70}


class Normal(object):
    """
    Implement normal distribution
    """
    def __init__(self, mu:float = 0, sigma:float = 1):
        self.mu = mu
        self.sigma = sigma

    def cdf(self, x):
        """
        Evaluate CDF at x
        """
        return (1 + special.erf((x - self.mu) / (self.sigma * np.sqrt(2)))) / 2

    def pdf(self, x):
        """
        Evaluate PDF at x
        """
        return np.exp((-1)/2 * ((x - self.mu) / self.sigma)**2) / (self.sigma * np.sqrt(2 * np.pi))


class LogNormal(object):
    """
    Log-normal distribution: the distribution of X where ln(X) ~ N(mu, sigma^2).

    An invalid scale (sigma <= 0) does not raise. It is recorded in the instance and every statistic
    then returns a failed Result with ErrorKind.INVALID_PARAMETER until a valid sigma is set.
    Instances are not synchronized; callers sharing one across threads must serialize access.

    :param mu: Location, the mean of ln(X).
    :type mu: float
    :param sigma: Scale, the standard deviation of ln(X). Must be strictly positive to be valid.
    :type sigma: float
    :param lower_bound: Lower end of the quantile search in the log domain, also returned by quantile(p) for p <= 0.
    :type lower_bound: float, optional, defaults to -16
    :param upper_bound: Upper end of the quantile search in the log domain, also returned by quantile(p) for p >= 1.
    :type upper_bound: float, optional, defaults to 16
    :param tolerance: Absolute tolerance on |cdf(x) - p| that ends the quantile search.
    :type tolerance: float, optional, defaults to 1e-7
    :param max_iterations: Maximum number of bisection steps of the quantile search.
    :type max_iterations: int, optional, defaults to 70

    :raises ValueError: If the quantile search options are inconsistent.
    """
    def __init__(self, mu:float, sigma:float, lower_bound:float = DEFAULT_SEARCH_PARAMETERS['lower_bound'],
                 upper_bound:float = DEFAULT_SEARCH_PARAMETERS['upper_bound'],
                 tolerance:float = DEFAULT_SEARCH_PARAMETERS['tolerance'],
                 max_iterations:int = DEFAULT_SEARCH_PARAMETERS['max_iterations']):
        check_bracket(lower_bound, upper_bound, tolerance, max_iterations)
        self.parameters = {'lower_bound':lower_bound, 'upper_bound':upper_bound, 'tolerance':tolerance, 'max_iterations':int(max_iterations)}
        self.mu = mu
        self._sigma = None
        self._valid = False
        self.set_sigma(sigma)

    @property
    def valid(self) -> bool:
        """
        True iff the last sigma set is strictly positive.
        """
        return self._valid

    def get_mu(self) -> float:
        return self.mu

    def get_sigma(self) -> float:
        return self._sigma

    @property
    def sigma(self) -> float:
        return self._sigma

    @sigma.setter
    def sigma(self, sigma:float):
        self.set_sigma(sigma)

    def set_mu(self, mu:float):
        """
        Overwrite mu. Validity is not affected.
        """
        self.mu = mu

    def set_sigma(self, sigma:float):
        """
        Overwrite sigma, even with an invalid value, and re-validate it.

        :param sigma: New scale parameter.
        :type sigma: float
        """
        self._valid = bool(sigma > 0) # False for nan as well
        self._sigma = sigma
        if not self._valid:
            logger.warning(f'invalid log-normal scale sigma={sigma}, statistics will report {ErrorKind.INVALID_PARAMETER.name}')

    def pdf(self, x:float) -> Result:
        """
        Evaluate PDF at x.

        Only meaningful for x > 0. x <= 0 is not checked: the result follows floating point
        semantics (nan, with numpy's RuntimeWarning).

        :param x: Point of evaluation.
        :type x: float

        :return: exp(-((ln x - mu)/sigma)^2 / 2) / (x sigma sqrt(2 pi))
        :rtype: Result
        """
        if not self._valid:
            return Result.failure(ErrorKind.INVALID_PARAMETER)
        return Result.success(self.log_distribution().pdf(np.log(x)) / x) # 1/x is the jacobian of ln

    def cdf(self, x:float) -> Result:
        """
        Evaluate CDF at x, P(X <= x).

        Only meaningful for x > 0. cdf(0) is 0, negative x gives nan (with numpy's RuntimeWarning).

        :param x: Point of evaluation.
        :type x: float

        :return: (1 + erf((ln x - mu) / (sigma sqrt(2)))) / 2
        :rtype: Result
        """
        if not self._valid:
            return Result.failure(ErrorKind.INVALID_PARAMETER)
        return Result.success(self.log_distribution().cdf(np.log(x)))

    def quantile(self, p:float) -> Result:
        """
        Inverse CDF: the x with cdf(x) = p, found by bisection over t = ln(x).

        For p <= 0 and p >= 1 the configured search bounds (-16 and 16 by default) are returned as they are.
        Otherwise the bracket [lower_bound, upper_bound] is halved until |cdf(exp(t)) - p| <= tolerance;
        when cdf(exp(t)) == p the lower end moves. The returned value is exp(t) of the accepted midpoint.

        :param p: Probability.
        :type p: float

        :return: The quantile, or a failure with ErrorKind.NON_CONVERGENCE if the tolerance was not met within
        max_iterations steps (typically because the quantile lies outside the search bounds).
        :rtype: Result
        """
        if not self._valid:
            return Result.failure(ErrorKind.INVALID_PARAMETER)
        if p <= 0:
            return Result.success(self.parameters['lower_bound'])
        elif p >= 1:
            return Result.success(self.parameters['upper_bound'])

        search = bisection(lambda t: self.cdf(np.exp(t)).value, p, self.parameters['lower_bound'], self.parameters['upper_bound'],
                           tolerance=self.parameters['tolerance'], max_iterations=self.parameters['max_iterations'])
        if not search.converged:
            logger.warning(f'quantile({p}) of {self!r} did not converge after {search.iterations} iterations (error {search.error:.3g})')
            return Result.failure(ErrorKind.NON_CONVERGENCE)
        return Result.success(np.exp(search.root))

    def get_mean(self) -> Result:
        """
        Mean, exp(mu + sigma^2 / 2).
        """
        if not self._valid:
            return Result.failure(ErrorKind.INVALID_PARAMETER)
        return Result.success(np.exp(self.mu + 0.5 * self.sigma**2))

    def get_variance(self) -> Result:
        """
        Variance as exp(sigma^2 - 1) * exp(2 mu + sigma^2).

        This is the historical formula of this component and differs from the textbook
        (exp(sigma^2) - 1) * exp(2 mu + sigma^2), so it is not get_std_deviation() squared.
        """
        if not self._valid:
            return Result.failure(ErrorKind.INVALID_PARAMETER)
        sigma_sq = self.sigma**2
        return Result.success(np.exp(sigma_sq - 1) * np.exp(2 * self.mu + sigma_sq))

    def get_std_deviation(self) -> Result:
        """
        Standard deviation, sqrt((exp(sigma^2) - 1) * exp(2 mu + sigma^2)).
        """
        if not self._valid:
            return Result.failure(ErrorKind.INVALID_PARAMETER)
        sigma_sq = self.sigma**2
        return Result.success(np.sqrt((np.exp(sigma_sq) - 1) * np.exp(2 * self.mu + sigma_sq)))

    def get_skewness(self) -> Result:
        if not self._valid:
            return Result.failure(ErrorKind.INVALID_PARAMETER)
        sigma_sq = self.sigma**2
        return Result.success((np.exp(sigma_sq) + 2) * np.sqrt(np.exp(sigma_sq) - 1))

    def get_kurtosis(self) -> Result:
        """
        Excess kurtosis.
        """
        if not self._valid:
            return Result.failure(ErrorKind.INVALID_PARAMETER)
        sigma_sq = self.sigma**2
        return Result.success(np.exp(4 * sigma_sq) + 2 * np.exp(3 * sigma_sq) + 3 * np.exp(2 * sigma_sq) - 6)

    def get_entropy(self) -> Result:
        """
        Differential entropy in bits, log2(sigma exp(mu + 1/2) sqrt(2 pi)).
        """
        if not self._valid:
            return Result.failure(ErrorKind.INVALID_PARAMETER)
        return Result.success(np.log2(self.sigma * np.exp(self.mu + 0.5) * np.sqrt(2 * np.pi)))

    def log_distribution(self) -> Normal:
        """
        The normal distribution of ln(X).
        """
        return Normal(mu=self.mu, sigma=self.sigma)

    def __repr__(self):
        return f'LogNormal(mu={self.mu!r}, sigma={self.sigma!r})'
