from .conn import SqlCon
from .audit import Audit, audited, retry

__all__ = ['SqlCon', 'Audit', 'audited', 'retry']
