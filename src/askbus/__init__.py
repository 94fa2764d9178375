"""
askbus – typed query-aggregation bus.

Import path convention::

    from askbus.application.query import QueryBus, BoolAnswer, VoteAnswer
    from askbus.kernel.errors import InvalidAnswerError
    from askbus.config.settings import QueryBusSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
