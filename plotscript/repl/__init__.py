from plotscript.repl.message_queue import MessageQueue
from plotscript.repl.worker import Consumer, Producer
from plotscript.repl.console import repl

__all__ = ["MessageQueue", "Consumer", "Producer", "repl"]
