import logging
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.cores.db import async_session
from app.models.blog import Category, Comment, Post
from app.repositories import category_repository


async def create_sample_data(session_factory: async_sessionmaker = async_session) -> bool:
    """
    Inserta datos de ejemplo solo si no existe ninguna categoría.
    Devuelve True si se insertaron datos.
    """
    db: AsyncSession = session_factory()

    try:
        if await category_repository.count(db) > 0:
            logging.info("Sample data already exists, skipping initialization")
            return False

        logging.info("Initializing sample data...")
        now = datetime.now()

        technology = Category(name="Technology", description="Latest technology trends and news",
                              created_at=now, updated_at=now)
        programming = Category(name="Programming",
                               description="Programming languages, frameworks, and best practices",
                               created_at=now, updated_at=now)
        web_development = Category(name="Web Development", description="Web development tutorials and guides",
                                   created_at=now, updated_at=now)
        db.add_all([technology, programming, web_development])
        await db.flush()

        def _post(title, content, author, category, days_ago):
            created = now - timedelta(days=days_ago)
            return Post(title=title, content=content, author=author, category_id=category.id,
                        created_at=created, updated_at=created)

        posts = [
            _post("Getting Started with FastAPI",
                  "FastAPI makes it easy to build production-ready APIs with Python type hints. "
                  "Validation, serialization and interactive docs come out of the box.",
                  "John Doe", technology, 5),
            _post("Python Best Practices in 2024",
                  "Python keeps evolving with new features and best practices. In this guide we explore "
                  "the habits experienced developers follow to write clean, maintainable code.",
                  "Jane Smith", programming, 4),
            _post("REST API Design Principles",
                  "Building robust REST APIs requires understanding key principles. Learn about resource "
                  "design, HTTP methods, status codes and versioning.",
                  "Bob Johnson", web_development, 3),
            _post("Database Design Fundamentals",
                  "A well-designed database is crucial for any application. This article covers "
                  "normalization, indexing and query optimization.",
                  "Alice Brown", programming, 2),
            _post("Microservices Architecture Guide",
                  "Microservices have become a popular architectural pattern. Explore how to design, "
                  "implement and deploy them effectively.",
                  "Charlie Wilson", technology, 1),
        ]
        db.add_all(posts)
        await db.flush()

        comments = [
            Comment(content="Great tutorial! Very helpful for beginners starting with FastAPI.",
                    author="Mike Taylor", post_id=posts[0].id, approved=True,
                    created_at=now, updated_at=now),
            Comment(content="Excellent explanation of REST principles. Will definitely refer to this article.",
                    author="Sarah Davis", post_id=posts[2].id, approved=True,
                    created_at=now, updated_at=now),
            Comment(content="Thanks for the comprehensive guide on microservices!",
                    author="Tom Anderson", post_id=posts[4].id, approved=False,
                    created_at=now, updated_at=now),
        ]
        db.add_all(comments)
        await db.commit()

        logging.info("✅ Created 3 categories, 5 posts and 3 comments")
        return True

    except Exception as e:
        await db.rollback()
        logging.error(f"❌ Error creating sample data: {str(e)}")
        raise

    finally:
        await db.close()
