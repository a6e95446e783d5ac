from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, Index, func
from sqlalchemy.orm import relationship
from app.cores.db import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    author = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_post_category_created", "category_id", "created_at"),
    )

    # Relaciones (se consultan explícitamente desde los repositorios)
    category = relationship("Category", back_populates="posts", lazy="raise")
    comments = relationship("Comment", back_populates="post", lazy="raise", passive_deletes=True)

    def __repr__(self):
        return f"<Post(id={self.id}, category_id={self.category_id}, title={self.title})>"
