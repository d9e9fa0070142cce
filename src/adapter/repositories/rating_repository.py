from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.dialect import conflict_insert
from src.app.repositories.rating_repository import (
    IRatingRepository,
    MovieRatingStats,
    RatingWithUser,
)
from src.domain.base import utcnow
from src.domain.entities import Rating, User


class RatingRepository(IRatingRepository):
    """Rating repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert(
        self, user_id: UUID, movie_id: str, rating: int, movie_title: Optional[str] = None
    ) -> Rating:
        """
        Insert or overwrite the rating keyed by (user_id, movie_id).

        A single INSERT ... ON CONFLICT DO UPDATE, so two concurrent first
        submissions collapse into one row instead of a duplicate-key error.
        """
        now = utcnow()
        stmt = conflict_insert(self.session, Rating.__table__).values(
            id=uuid4(),
            user_id=user_id,
            movie_id=movie_id,
            rating=rating,
            movie_title=movie_title,
            created_at=now,
            updated_at=now,
        )
        changes = {"rating": stmt.excluded.rating, "updated_at": stmt.excluded.updated_at}
        if movie_title is not None:
            changes["movie_title"] = stmt.excluded.movie_title
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "movie_id"], set_=changes
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.get_by_user_and_movie(user_id, movie_id)

    async def get_by_user_and_movie(self, user_id: UUID, movie_id: str) -> Optional[Rating]:
        """Get the rating a user gave a movie"""
        stmt = (
            select(Rating)
            .where(Rating.user_id == user_id, Rating.movie_id == movie_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_user(self, user_id: UUID, offset: int, limit: int) -> List[Rating]:
        """Get a page of a user's ratings, most recently updated first"""
        stmt = (
            select(Rating)
            .where(Rating.user_id == user_id)
            .order_by(Rating.updated_at.desc(), Rating.id.desc())
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_user(self, user_id: UUID) -> int:
        """Count a user's ratings"""
        stmt = select(func.count()).select_from(Rating).where(Rating.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_by_movie(self, movie_id: str) -> List[RatingWithUser]:
        """Get all ratings of a movie with the rating users"""
        stmt = (
            select(Rating, User)
            .join(User, User.id == Rating.user_id, isouter=True)
            .where(Rating.movie_id == movie_id)
            .order_by(Rating.updated_at.desc(), Rating.id.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [(rating, user) for rating, user in result.all()]

    async def get_top_rated(self, min_ratings: int, limit: int) -> List[MovieRatingStats]:
        """Aggregate per movie and keep movies with enough ratings"""
        average = func.avg(Rating.rating).label("average_rating")
        total = func.count(Rating.id).label("total_ratings")
        stmt = (
            select(Rating.movie_id, average, total, func.max(Rating.movie_title))
            .group_by(Rating.movie_id)
            .having(func.count(Rating.id) >= min_ratings)
            .order_by(average.desc(), total.desc(), Rating.movie_id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [
            MovieRatingStats(
                movie_id=movie_id,
                average_rating=float(avg),
                total_ratings=count,
                movie_title=title,
            )
            for movie_id, avg, count, title in result.all()
        ]

    async def delete(self, user_id: UUID, movie_id: str) -> bool:
        """Delete a user's rating for a movie"""
        stmt = delete(Rating).where(Rating.user_id == user_id, Rating.movie_id == movie_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_all_by_user(self, user_id: UUID) -> int:
        """Delete every rating of a user"""
        stmt = delete(Rating).where(Rating.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
