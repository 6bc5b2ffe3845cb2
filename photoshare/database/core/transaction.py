# photoshare/database/core/transaction.py
from contextlib import contextmanager
from sqlalchemy.orm import Session

@contextmanager
def transactional(db: Session):
    """
    Unit of work over a request session: COMMIT on normal exit, ROLLBACK if
    an exception bubbles out. Works whether or not the session already
    autobegan (e.g. after the auth dependency loaded the caller).
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
