"""
Graph inspection helpers.
Summaries and orderings of a Network's node structure, for debugging.
"""

import numpy as np
from typing import Dict, List
from collections import Counter

from .node import NodeHandle


def get_graph_stats(network) -> Dict:
    """
    Collect graph statistics without printing.

    Returns:
        dict with node/edge counts, fan-in/fan-out statistics and the
        per-operator node counts
    """
    nodes = network.registry.nodes
    if not nodes:
        return {
            'nodes': 0,
            'edges': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    n_nodes = len(nodes)
    fan_ins = [len(node.inputs) for node in nodes]

    fan_outs = [0] * n_nodes
    for node in nodes:
        for h in node.inputs:
            fan_outs[h.index] += 1

    op_counter = Counter(node.op_tag for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def graph_summary(network, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph and return the statistics.

    Args:
        network: Network to inspect
        detailed: also print one line per node (graphs of up to 100 nodes)
    """
    stats = get_graph_stats(network)
    if stats['nodes'] == 0:
        print("Empty computation graph")
        return stats

    n_nodes = stats['nodes']
    rule = "-" * 60
    print(rule)
    print(f"Network {network.graph_id}: {n_nodes} nodes, {stats['edges']} edges")
    print(rule)
    print(f"  placeholders {len(network.placeholders):>5}   variables {len(network.variables):>5}")
    print(f"  fan-in  max {stats['max_fan_in']:>4}  mean {stats['avg_fan_in']:6.2f}")
    print(f"  fan-out max {stats['max_fan_out']:>4}  mean {stats['avg_fan_out']:6.2f}")
    print("  nodes by kind:")
    for op_tag, count in Counter(stats['operations']).most_common(10):
        share = 100.0 * count / n_nodes
        print(f"    {op_tag:<12} {count:>6}  {share:5.1f}%")

    if detailed and n_nodes <= 100:
        print(rule)
        for i, node in enumerate(network.registry.nodes):
            label = node.name or ""
            inputs = " ".join(f"%{h.index}" for h in node.inputs)
            print(f"  %{i:<4} = {node.op_tag:<12} {inputs:<16} {label}".rstrip())

    print(rule)
    return stats


def topological_order(network, handle: NodeHandle) -> List[NodeHandle]:
    """
    Nodes needed to evaluate `handle`, inputs before consumers.
    Same (handle, inputs_done) postorder as Network.forward.
    """
    network.registry.get(handle)
    order: List[NodeHandle] = []
    done = set()
    stack = [(handle, False)]
    while stack:
        h, inputs_done = stack.pop()
        if h in done:
            continue
        if inputs_done:
            done.add(h)
            order.append(h)
            continue
        stack.append((h, True))
        for i in network.registry.get(h).inputs:
            if i not in done:
                stack.append((i, False))
    return order
