from lognormal.results import Result


def get_statistics(distribution):
    """
    Collect the parameters and every descriptor of a log-normal distribution.

    :param distribution: The distribution to describe.
    :type distribution: lognormal.LogNormal

    :return: Results keyed by 'mu', 'sigma', 'mean', 'median', 'variance', 'std_deviation', 'skewness', 'kurtosis' and 'entropy'.
    An invalid distribution still reports its parameters, the descriptors are failures.
    :rtype: dict
    """
    return {'mu': Result.success(distribution.get_mu()),
            'sigma': Result.success(distribution.get_sigma()),
            'mean': distribution.get_mean(),
            'median': distribution.quantile(0.5),
            'variance': distribution.get_variance(),
            'std_deviation': distribution.get_std_deviation(),
            'skewness': distribution.get_skewness(),
            'kurtosis': distribution.get_kurtosis(),
            'entropy': distribution.get_entropy()}
