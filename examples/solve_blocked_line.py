"""Example: a single disk between start and goal forces a hug around its boundary."""

from circle_path import get_path, path_cost

CIRCLES = [
    {"x": 0, "y": 0, "r": 0},
    {"x": 5, "y": 0, "r": 3},
    {"x": 10, "y": 0, "r": 0},
]


def main() -> None:
    path = get_path(CIRCLES)
    if not path:
        print("No path")
        return
    for node in path:
        print(f"{node.as_dict()}")
    print(f"Cost: {path_cost(path):.4f}")


if __name__ == "__main__":
    main()
