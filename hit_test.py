from __future__ import annotations

def _contains_hole(record, x: float, y: float) -> bool:
    for hole in record.holes:
        if hole.shape is not None and hole.shape.contains(x, y):
            return True
    return False

def pick_graphics_data(records: list, point: tuple[float, float], all: bool = False) -> list:
    """Return the records whose filled shape contains point, first match only unless all."""
    picked = []
    x, y = point

    for data in records:
        if not data.fill_style.visible or data.shape is None:
            continue

        # scratch point in the record's local frame, one per record check
        if data.matrix is not None:
            local = data.matrix.apply_inverse(x, y)
            if local is None:
                continue
            local_x, local_y = local
        else:
            local_x, local_y = x, y

        if not data.shape.contains(local_x, local_y):
            continue
        if _contains_hole(data, local_x, local_y):
            continue

        if not all:
            return [data]
        picked.append(data)

    return picked
