import pytest

from apps.domains.results.services.band_scale import band_for_correct_count


@pytest.mark.parametrize(
    "correct, band",
    [
        (40, 9.0),
        (39, 9.0),
        (38, 8.5),
        (37, 8.5),
        (35, 8.0),
        (33, 7.5),
        (30, 7.0),
        (29, 6.5),
        (27, 6.5),
        (23, 6.0),
        (19, 5.5),
        (15, 5.0),
        (13, 4.5),
        (10, 4.0),
        (8, 3.5),
        (6, 3.0),
        (4, 2.5),
        (3, 2.0),
        (0, 2.0),
    ],
)
def test_band_table(correct, band):
    assert band_for_correct_count(correct) == band


def test_band_is_monotonic():
    bands = [band_for_correct_count(n) for n in range(0, 41)]
    assert bands == sorted(bands)
