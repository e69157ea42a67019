"""Contains the logger used by polytraj modules.

``polytraj`` logs through the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library
and never installs handlers itself. Messages are emitted at ``DEBUG`` level:
root solves on constant polynomials and the number of roots discarded while
selecting extremum candidates.

Calling applications can configure the format and log level of the displayed
messages by configuring ``polytraj.logger.polytraj_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "polytraj"
polytraj_logger = logging.getLogger(logger_name)
