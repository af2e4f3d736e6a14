# -*- coding: utf-8 -*-
""" Hooks into the query processing pipeline. """


class Instrumentation:
    """Instrumentation provides a pattern to hook into query processing for
    observability purposes.
    """

    def on_query_start(self) -> None:
        """This will be called at the very start of query processing."""

    def on_query_end(self) -> None:
        """This will be called once the result is ready.

        For asynchronous runtimes this happens when the result resolves.
        """

    def on_parsing_start(self) -> None:
        """This will be called just before the request document is parsed.

        It will not be called when the pipeline is provided an already
        parsed document.
        """

    def on_parsing_end(self) -> None:
        """This will be called after the request document has been parsed.

        This is called even if parsing failed due to a syntax error.
        """

    def on_validation_start(self) -> None:
        """This will be called before query validation."""

    def on_validation_end(self) -> None:
        """This will be called after query validation.

        This is called even if validation raised an error.
        """

    def on_execution_start(self) -> None:
        """This will be called before operation execution starts."""

    def on_execution_end(self) -> None:
        """This will be after operation execution ends
        and the execution result is ready."""


class MultiInstrumentation(Instrumentation):
    """Combine multiple :class:`Instrumentation` instances.

    Instrumentations will be processed as a stack: ``on_*_start`` hooks will
    be called in order while ``on_*_end`` hooks will be called in reverse
    order.
    """

    def __init__(self, *instrumentations: Instrumentation) -> None:
        self.instrumentations = instrumentations

    def on_query_start(self) -> None:
        for i in self.instrumentations:
            i.on_query_start()

    def on_query_end(self) -> None:
        for i in self.instrumentations[::-1]:
            i.on_query_end()

    def on_parsing_start(self) -> None:
        for i in self.instrumentations:
            i.on_parsing_start()

    def on_parsing_end(self) -> None:
        for i in self.instrumentations[::-1]:
            i.on_parsing_end()

    def on_validation_start(self) -> None:
        for i in self.instrumentations:
            i.on_validation_start()

    def on_validation_end(self) -> None:
        for i in self.instrumentations[::-1]:
            i.on_validation_end()

    def on_execution_start(self) -> None:
        for i in self.instrumentations:
            i.on_execution_start()

    def on_execution_end(self) -> None:
        for i in self.instrumentations[::-1]:
            i.on_execution_end()
