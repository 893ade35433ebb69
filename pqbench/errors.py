"""Exceptions raised by the priority queue implementations."""


class QueueError(RuntimeError):
    """Base class for priority queue failures."""


class EmptyQueueError(QueueError):
    """Raised when an element is requested from an empty queue."""


class ElementNotFoundError(QueueError):
    """Raised when a key change targets an element that is not queued."""