import math

from hexnav import HexGrid, MoverProfile, PathNotFound, search

width, height = 10, 10
grid = HexGrid(width, height)
start = grid.cell(0, 0)
goal = grid.cell(5, 2)  # keep within demo bounds

terrain = {(1, 0): "forest", (2, 1): "river", (3, 1): "river", (2, 0): "forest"}

movers = [
    MoverProfile(name="horse", terrain_costs={"forest": 2.0, "river": math.inf}),
    MoverProfile(name="bird"),
]


if __name__ == "__main__":
    for mover in movers:
        try:
            route = search(start, goal, mover.obstacles(terrain))
        except PathNotFound as exc:
            print(f"{mover.name}: {exc}")
            continue
        print(f"{mover.name} path:", " -> ".join(str(key) for key in route.keys))
        print(f"{mover.name} cost:", route.cost)
