"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exam_scores():
    """Eleven exam scores: mean 79, median 75, mode 70."""
    return [60, 64, 70, 70, 70, 75, 80, 90, 95, 95, 100]


@pytest.fixture
def forty_integers():
    """Forty small integers: mean 14.975, median 15, mode 12, sd ~2.496."""
    return [
        17, 12, 14, 17, 13, 16, 18, 20, 13, 12,
        12, 17, 16, 15, 14, 12, 12, 13, 17, 14,
        15, 12, 15, 16, 12, 18, 20, 19, 12, 15,
        18, 14, 16, 17, 15, 19, 12, 13, 12, 15,
    ]


@pytest.fixture
def noise_100():
    """One hundred zero-centred noise values: mean ~-0.0287, sd ~0.2447."""
    return [
        -0.17153201811526, -0.24688253248949, 0.11338441630439, 0.21688342552633, -0.011673274048979,
        -0.02003736435437, -0.34336588850306, 0.078405646177621, -0.065555801648822, 0.028825789263126,
        0.042177644981986, -0.50528595024946, -0.4273793332064, 0.3017619807293, 0.040940131180399,
        0.12162445946489, 0.046924000912204, -0.31441861873484, -0.24797010811493, -0.31245115727514,
        0.36179798762062, -0.46964621705612, 0.1159236116096, 0.44229719468743, 0.17553670198059,
        -0.049653531282555, 0.035737645461893, -0.52367570682749, 0.12014526093805, -0.2060419038672,
        -0.12789255250514, -0.19007839020849, -0.17402649310177, 0.12573206620924, 0.2646133618755,
        0.41670972482352, 0.030866480670971, 0.07031579787869, -0.085545940939841, 0.34396444357458,
        -0.34488388941556, 0.15597328456662, -0.39937390581988, 0.12960169981417, 0.26218698256904,
        -0.1620734969907, -0.028376561029554, -0.080399756342166, 0.14758867251726, -0.23720637932878,
        -0.27695138789864, 0.05257578120839, 0.21722344584028, 0.19122661193002, -0.20626312001628,
        -0.059435335753833, -0.1995971405858, -0.23267982758906, 0.33527000452094, 0.043882296754041,
        -0.07738562758975, 0.5515265183042, 0.34121467746293, 0.011521247389367, 0.17429773253761,
        -0.22635967501679, 0.15713909187964, -0.1787810576828, -0.34801215785823, -0.082164064211855,
        0.64074819328462, -0.044302007836004, -0.38284231659945, -0.41366498500892, -0.15964965729918,
        0.39248247734553, -0.12031750238867, -0.16930717524153, -0.40060591948563, 0.0068312326939647,
        -0.1898421274294, 0.44393250846458, 0.029613400394471, -0.22581182588274, 0.02045533910155,
        0.11398918107627, -0.20562256981737, 0.11476536764274, -0.32378382765313, -0.09196424943184,
        0.17281588794572, -0.35251113939319, 0.073961983637722, 0.11265707197549, -0.317176214879,
        0.091016285581571, -0.14930773416087, 0.047940214497312, -0.13754460419439, -0.078689419991652,
    ]


@pytest.fixture
def heights():
    """One hundred heights binned to 61..73 inches, mildly left-skewed."""
    return [61] * 5 + [64] * 18 + [67] * 42 + [70] * 27 + [73] * 8
