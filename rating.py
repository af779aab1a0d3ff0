"""
Composite SEO rating
"""
from numbers import Real

from models import NOT_FOUND, OnPageData, ProviderResult

MIN_RATING = 0.0
MAX_RATING = 10.0
FIELD_POINTS = 2


def is_present(value) -> bool:
    """A field counts as present when it is non-empty and not the "Not found" default"""
    return bool(value) and value != NOT_FOUND


def calculate_rating(performance: ProviderResult, on_page: OnPageData) -> float:
    """Fold the performance score and on-page fields into a rating in [0, 10].

    A performance score of 100 contributes 10 points; title, meta description,
    canonical link and at least one H1 contribute 2 points each. The sum is
    clamped, so a page with everything in place reaches 10 before the
    performance score is taken into account.
    """
    rating = 0.0

    if performance.available and isinstance(performance.value, Real) and not isinstance(performance.value, bool):
        rating += performance.value / 10
    if is_present(on_page.page_title):
        rating += FIELD_POINTS
    if is_present(on_page.meta_description):
        rating += FIELD_POINTS
    if is_present(on_page.canonical_tag):
        rating += FIELD_POINTS
    if len(on_page.h1_tags) > 0:
        rating += FIELD_POINTS

    return float(min(MAX_RATING, max(MIN_RATING, rating)))
