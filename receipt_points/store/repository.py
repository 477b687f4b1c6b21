# receipt_points/store/repository.py
import threading
import uuid
from typing import Dict, List

from ..errors import ReceiptNotFound
from ..logging import get_logger
from ..models import Receipt

logger = get_logger(__name__)

class ReceiptStore:
    """
    In-memory, append-only receipt store keyed by a generated id.
    All access to the backing dict goes through one lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._receipts: Dict[str, Receipt] = {}

    def put(self, receipt: Receipt) -> str:
        with self._lock:
            receipt_id = str(uuid.uuid4())
            while receipt_id in self._receipts:
                receipt_id = str(uuid.uuid4())
            self._receipts[receipt_id] = receipt.with_id(receipt_id)
        logger.info("Stored receipt %s (%s, %d items)", receipt_id, receipt.retailer, len(receipt.items))
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFound(receipt_id)
        return receipt

    def list(self) -> List[Receipt]:
        with self._lock:
            return list(self._receipts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
