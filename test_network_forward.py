"""
Forward pass tests: evaluation, feeding, variables and error kinds.
"""

import numpy as np
import pytest

from graphgrad import Network, NetworkConfig, UnfedPlaceholder, NotEvaluated, NodeNotFound


def test_add_placeholders():
    net = Network()
    x = net.placeholder()
    y = net.placeholder()
    z = net.add(x, y)

    result = net.feed(x, [[1.0, 1.0], [2.0, 2.0]]).feed(y, [[3.0, 4.0], [3.0, 4.0]]).forward(z)
    np.testing.assert_allclose(result, [[4.0, 5.0], [5.0, 6.0]])


def test_add_variable_and_placeholder():
    net = Network()
    x = net.variable([[1.0, 1.0], [2.0, 2.0]])
    y = net.placeholder()
    z = net.add(x, y)

    net.feed(y, [[3.0, 4.0], [3.0, 4.0]])
    np.testing.assert_allclose(net.forward(z), [[4.0, 5.0], [5.0, 6.0]])
    # intermediate values stay readable after the pass
    np.testing.assert_allclose(net.value_of(y), [[3.0, 4.0], [3.0, 4.0]])


def test_sum_independent_of_tree_shape():
    values = [np.full((2, 3), float(i)) for i in range(1, 6)]
    expected = sum(values)

    # left-leaning chain ((((a+b)+c)+d)+e)
    net = Network()
    leaves = [net.placeholder() for _ in values]
    for h, v in zip(leaves, values):
        net.feed(h, v)
    acc = leaves[0]
    for h in leaves[1:]:
        acc = net.add(acc, h)
    np.testing.assert_allclose(net.forward(acc), expected)

    # balanced tree ((a+b)+(c+d))+e
    net2 = Network()
    leaves2 = [net2.variable(v) for v in values]
    ab = net2.add(leaves2[0], leaves2[1])
    cd = net2.add(leaves2[2], leaves2[3])
    root = net2.add(net2.add(ab, cd), leaves2[4])
    np.testing.assert_allclose(net2.forward(root), expected)


def test_refeed_overwrites():
    net = Network()
    x = net.placeholder()
    y = net.placeholder()
    z = net.add(x, y)

    net.feed(x, [1.0, 2.0]).feed(y, [10.0, 20.0])
    np.testing.assert_allclose(net.forward(z), [11.0, 22.0])

    net.feed(x, [5.0, 5.0])
    np.testing.assert_allclose(net.forward(z), [15.0, 25.0])
    assert len(net.feeder) == 2


def test_assign_variable_is_seen_by_next_forward():
    net = Network()
    w = net.variable([1.0, 1.0])
    y = net.placeholder()
    z = net.add(w, y)
    net.feed(y, [0.0, 1.0])
    np.testing.assert_allclose(net.forward(z), [1.0, 2.0])

    net.assign(w, [3.0, 3.0])
    np.testing.assert_allclose(net.forward(z), [3.0, 4.0])

    # feeding a variable reassigns it
    net.feed(w, [0.0, 0.0])
    np.testing.assert_allclose(net.forward(z), [0.0, 1.0])


def test_reforward_is_bit_identical():
    net = Network()
    x = net.variable(np.linspace(0.0, 1.0, 7))
    y = net.placeholder()
    z = net.add(net.add(x, y), x)
    net.feed(y, np.sqrt(np.arange(7.0)))

    first = net.forward(z).copy()
    second = net.forward(z)
    assert np.array_equal(first, second)


def test_broadcasting_forward():
    net = Network()
    x = net.variable([[1.0, 2.0], [3.0, 4.0]])
    b = net.placeholder()
    z = net.add(x, b)
    net.feed(b, [10.0, 20.0])
    np.testing.assert_allclose(net.forward(z), [[11.0, 22.0], [13.0, 24.0]])


def test_shared_input_is_evaluated():
    net = Network()
    x = net.placeholder()
    z = net.add(x, x)
    net.feed(x, [1.5])
    np.testing.assert_allclose(net.forward(z), [3.0])


def test_unfed_placeholder_names_handle():
    net = Network()
    x = net.variable([1.0])
    y = net.placeholder(name="y")
    z = net.add(x, y)

    with pytest.raises(UnfedPlaceholder) as excinfo:
        net.forward(z)
    assert excinfo.value.handle == y
    assert "y" in str(excinfo.value)


def test_forward_leaf_returns_fed_value():
    net = Network()
    x = net.placeholder()
    net.feed(x, 2.0)
    assert net.forward(x) == 2.0


def test_value_of_before_forward():
    net = Network()
    x = net.placeholder()
    y = net.placeholder()
    z = net.add(x, y)
    with pytest.raises(NotEvaluated):
        net.value_of(z)


def test_feed_computed_node_rejected():
    net = Network()
    x = net.placeholder()
    z = net.add(x, x)
    with pytest.raises(ValueError):
        net.feed(z, [1.0])
    with pytest.raises(ValueError):
        net.assign(x, [1.0])


def test_non_numeric_value_rejected():
    net = Network()
    x = net.placeholder()
    with pytest.raises(TypeError):
        net.feed(x, "not a tensor")
    with pytest.raises(TypeError):
        net.variable({"a": 1})


def test_handles_from_other_network():
    a = Network()
    b = Network()
    xa = a.placeholder()
    b.placeholder()

    with pytest.raises(NodeNotFound):
        b.forward(xa)
    with pytest.raises(NodeNotFound):
        b.add(xa, xa)
    # NodeNotFound is also a KeyError
    with pytest.raises(KeyError):
        b.node(xa)


def test_arity_checked_at_construction():
    from graphgrad.ops import Addition

    net = Network()
    x = net.placeholder()
    with pytest.raises(ValueError):
        net.apply(Addition(), x)

    # with checks off the node is registered as is
    loose = Network(NetworkConfig(check_arity=False))
    x = loose.placeholder()
    loose.apply(Addition(), x)
    assert len(loose) == 2


def test_config_dtype():
    net = Network(NetworkConfig(dtype="float32"))
    x = net.variable([1, 2, 3])
    assert net.value_of(x).dtype == np.float32
