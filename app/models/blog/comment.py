from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, DateTime, Index, func
from sqlalchemy.orm import relationship
from app.cores.db import Base

class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    author = Column(String(100), nullable=False)
    # False = pendiente de moderación, True = aprobado
    approved = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_comment_post_approved", "post_id", "approved"),
    )

    post = relationship("Post", back_populates="comments", lazy="raise")

    def __repr__(self):
        return f"<Comment(id={self.id}, post_id={self.post_id}, approved={self.approved})>"
