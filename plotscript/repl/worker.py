"""Producer / consumer pair connecting a reader to the interpreter thread.

The consumer is the only thread that touches interpreter state. It pops one
source line at a time, evaluates it and pushes a ``(result, error)`` pair,
where `error` is empty on success. An empty line stops the consumer.
"""

from __future__ import annotations

import io
import logging
import threading

from plotscript.errors import SemanticError
from plotscript.interpreter import Interpreter
from plotscript.types.expression import Expression
from plotscript.repl.message_queue import MessageQueue

logger = logging.getLogger(__name__)

OutputMessage = tuple[Expression, str]
InputQueue = MessageQueue[str]
OutputQueue = MessageQueue[OutputMessage]

STOP = ""
PARSE_ERROR = "Invalid Expression. Could not parse."


class Producer:
    def __init__(self, input_queue: InputQueue):
        self.input_queue = input_queue

    def __call__(self, line: str) -> None:
        self.input_queue.push(line)

    def stop(self) -> None:
        self.input_queue.push(STOP)


class Consumer(threading.Thread):
    def __init__(self, input_queue: InputQueue, output_queue: OutputQueue, interp: Interpreter):
        super().__init__(name="plotscript-consumer", daemon=True)
        self.input_queue = input_queue
        self.output_queue = output_queue
        self.interp = interp

    def handle(self, line: str) -> OutputMessage:
        if not self.interp.parse_stream(io.StringIO(line)):
            return Expression(), PARSE_ERROR
        try:
            return self.interp.evaluate(), ""
        except SemanticError as ex:
            return Expression(), str(ex)

    def run(self) -> None:
        logger.debug("consumer started")
        while True:
            line = self.input_queue.wait_and_pop()
            if line == STOP:
                break
            self.output_queue.push(self.handle(line))
        logger.debug("consumer stopped")
