"""Test the normal helper distribution `Normal`"""

import numpy as np
import pytest
from scipy import stats

from lognormal import Normal


@pytest.mark.parametrize("mu, sigma", [(0, 1), (1.5, 0.3), (-4, 2)])
def test_Normal_matches_scipy(mu, sigma):
    normal = Normal(mu=mu, sigma=sigma)
    x = np.linspace(mu - 4 * sigma, mu + 4 * sigma, 17)
    assert normal.cdf(x) == pytest.approx(stats.norm(loc=mu, scale=sigma).cdf(x), abs=1e-12)
    assert normal.pdf(x) == pytest.approx(stats.norm(loc=mu, scale=sigma).pdf(x), rel=1e-10)


def test_Normal_defaults():
    normal = Normal()
    assert normal.mu == 0
    assert normal.sigma == 1
    assert normal.cdf(0) == 0.5
    assert normal.pdf(0) == pytest.approx(1 / np.sqrt(2 * np.pi))
    assert normal.cdf(1) == pytest.approx(0.8413447460685429, abs=1e-12)
