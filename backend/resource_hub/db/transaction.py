from contextlib import contextmanager
from sqlalchemy.orm import Session

@contextmanager
def transactional(db: Session):
    """Commit everything done inside the block at once, or roll it all back."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
