# main.py
from pathlab.app.build import build


def run(example: str = "complex", algorithm: str = "dijkstra", interval_ms: int = 500):
    app = build(
        {
            "graph": {"kind": "example", "name": example},
            "playback": {"interval_ms": interval_ms},
        }
    )

    # one traced run, played back on virtual time
    result = app.inspect(algorithm)
    app.playback.play()
    app.kernel.run()
    app.close_inspection()

    # all three over the same snapshot
    report = app.compare()
    target = app.graph.target or result.source
    for row in report.distance_table(target):
        print(f"{row['label']:>15}  {row['elapsed_ms']:8.3f} ms  d({target}) = {row['distance']}")
    return report


if __name__ == "__main__":
    run()
