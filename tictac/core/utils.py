def format_line(line):
    return " ".join(f"{r},{c}" for r, c in line) or "-"


def format_info(value, nodes, cache_hits, cutoffs, elapsed, line):
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    if value > 0:
        outcome = "X wins"
    elif value < 0:
        outcome = "O wins"
    else:
        outcome = "draw"
    return (f"info value {value} ({outcome}) nodes {nodes} nps {nps} "
            f"hits {cache_hits} cutoffs {cutoffs} time {elapsed * 1000:.0f}ms "
            f"line {format_line(line)}")
