"""
In-memory review book: paginated reads per product and append-only creation.
"""
import itertools
import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from catalog import NotFound, paginate
from schemas import Pagination, Product, RatingSummary, Review, ReviewCreate

logger = logging.getLogger(__name__)

REVIEW_PAGE_SIZE = 5


class ReviewBook:
    def __init__(self, reviews: Iterable[Review] = (), products: Optional[Sequence[Product]] = None):
        self._reviews: List[Review] = list(reviews)
        self._product_ids = {p.id for p in products} if products is not None else None
        start = max((r.id for r in self._reviews), default=0) + 1
        self._ids = itertools.count(start)

    def _for_product(self, product_id: int) -> List[Review]:
        return [r for r in self._reviews if r.product_id == product_id]

    def list_reviews(self, product_id: int, page: int = 1) -> Tuple[List[Review], Pagination]:
        return paginate(self._for_product(product_id), page, REVIEW_PAGE_SIZE)

    def create_review(self, payload: ReviewCreate) -> Review:
        if self._product_ids is not None and payload.product_id not in self._product_ids:
            raise NotFound("product", payload.product_id)
        review = Review(
            **payload.model_dump(),
            id=next(self._ids),
            helpful_count=0,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._reviews.append(review)
        logger.info("review %d created for product %d", review.id, review.product_id)
        return review

    def rating_summary(self, product_id: int) -> RatingSummary:
        reviews = self._for_product(product_id)
        fit = {"small": 0, "normal": 0, "large": 0}
        for r in reviews:
            fit[r.fit] += 1
        average = round(sum(r.rating for r in reviews) / len(reviews), 1) if reviews else 0.0
        return RatingSummary(average=average, count=len(reviews), fit=fit)
