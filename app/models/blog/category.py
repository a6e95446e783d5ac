from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from app.cores.db import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    # Solo referencia inversa: borrar una categoría con posts se bloquea, no se propaga
    posts = relationship("Post", back_populates="category", lazy="raise", passive_deletes=True)

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"
