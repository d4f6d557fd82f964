"""Interactive read-eval-print loop.

The calling thread only reads input and prints results; evaluation happens on
a Consumer thread that owns the interpreter for the whole session. Ctrl-C while
a result is pending interrupts the running evaluation instead of the session.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from plotscript.interpreter import Interpreter
from plotscript.repl.message_queue import MessageQueue
from plotscript.repl.worker import Consumer, OutputMessage, OutputQueue, Producer

logger = logging.getLogger(__name__)

PROMPT = "\nplotscript> "


def _wait_for_result(output_queue: OutputQueue, interp: Interpreter) -> OutputMessage:
    try:
        return output_queue.wait_and_pop()
    except KeyboardInterrupt:
        logger.debug("interrupt requested")
        interp.interrupt.set()
        try:
            return output_queue.wait_and_pop()
        finally:
            interp.interrupt.clear()


def repl(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    input_queue: MessageQueue[str] = MessageQueue()
    output_queue: OutputQueue = MessageQueue()
    producer = Producer(input_queue)
    consumer = Consumer(input_queue, output_queue, interp)
    consumer.start()

    try:
        while True:
            stdout.write(PROMPT)
            stdout.flush()
            line = stdin.readline()
            if not line:
                break  # end of input
            line = line.rstrip("\r\n")
            if not line:
                continue

            producer(line)
            result, error = _wait_for_result(output_queue, interp)
            if error:
                print(error, file=stderr)
            else:
                print(result, file=stdout)
    finally:
        producer.stop()
        consumer.join()
