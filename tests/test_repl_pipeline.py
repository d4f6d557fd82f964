import io

import pytest

from plotscript.interpreter import Interpreter
from plotscript.repl import Consumer, MessageQueue, Producer, repl
from plotscript.repl.console import PROMPT
from plotscript.repl.worker import PARSE_ERROR
from plotscript.types.expression import Expression


@pytest.fixture
def pipeline():
    input_queue = MessageQueue()
    output_queue = MessageQueue()
    consumer = Consumer(input_queue, output_queue, Interpreter())
    consumer.start()
    producer = Producer(input_queue)
    yield producer, output_queue, consumer
    producer.stop()
    consumer.join(timeout=10)


def test_results_arrive_in_input_order(pipeline):
    producer, output_queue, _ = pipeline
    lines = ["(+ 1 2)", "(define a", "foo", "(define a 5)", "(* a 2)"]
    for line in lines:
        producer(line)
    outputs = [output_queue.wait_and_pop(timeout=10) for _ in lines]

    assert outputs[0] == (Expression(3), "")
    assert outputs[1][1] == PARSE_ERROR
    assert outputs[2][1] == "Error during evaluation: unknown symbol foo"
    assert outputs[3] == (Expression(5), "")
    assert outputs[4] == (Expression(10), "")


def test_error_results_carry_a_none_expression(pipeline):
    producer, output_queue, _ = pipeline
    producer("(first (list))")
    result, error = output_queue.wait_and_pop(timeout=10)
    assert result.is_none()
    assert "empty list" in error


def test_stop_ends_the_consumer():
    input_queue = MessageQueue()
    consumer = Consumer(input_queue, MessageQueue(), Interpreter())
    consumer.start()
    Producer(input_queue).stop()
    consumer.join(timeout=10)
    assert not consumer.is_alive()


def test_handle_runs_on_the_calling_thread():
    consumer = Consumer(MessageQueue(), MessageQueue(), Interpreter())
    assert consumer.handle("(list 1)") == (Expression.from_list([Expression(1)]), "")
    assert consumer.handle(")") == (Expression(), PARSE_ERROR)


def test_repl_session():
    stdin = io.StringIO("(+ 1 2)\n\nfoo\n(define\n(define b I)\n")
    stdout, stderr = io.StringIO(), io.StringIO()
    repl(Interpreter(), stdin, stdout, stderr)

    out = stdout.getvalue()
    assert out.count(PROMPT) == 6
    assert "(3)" in out
    assert "(0,1)" in out
    assert stderr.getvalue().splitlines() == [
        "Error during evaluation: unknown symbol foo",
        PARSE_ERROR,
    ]


@pytest.mark.parametrize(
    "line",
    [
        "(sin 1e400)",
        "(+ 1e400 -1e400)",
        "(begin (define loop (lambda (x) (loop x))) (loop 1))",
    ],
)
def test_consumer_survives_host_failures(pipeline, line):
    producer, output_queue, consumer = pipeline
    producer(line)
    result, error = output_queue.wait_and_pop(timeout=10)
    assert result.is_none()
    assert error.startswith("Error")

    producer("(+ 1 2)")
    assert output_queue.wait_and_pop(timeout=10) == (Expression(3), "")
    assert consumer.is_alive()
