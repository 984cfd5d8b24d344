"""
This example script moves an agent towards a target in screen space using
``Vector2``: the desired velocity is the normalized direction to the target,
the steering force is capped with ``limit_length``, and the heading is read
back with ``angle``.
"""

import math

from vecto import Vector2, set_up_simple_logging

MAX_SPEED = 4.0
MAX_FORCE = 0.5


def main():
    set_up_simple_logging()

    position = Vector2(0.0, 0.0)
    velocity = Vector2.RIGHT
    target = Vector2(40.0, -25.0)

    for step in range(40):
        desired = (target - position).normalized() * MAX_SPEED
        steering = (desired - velocity).limit_length(MAX_FORCE)
        velocity = (velocity + steering).limit_length(MAX_SPEED)
        position += velocity

        heading = math.degrees(velocity.angle())
        print(f"{step:2d}: position={position} heading={heading:7.2f} deg")
        if position.distance_to(target) < MAX_SPEED:
            print("Target reached.")
            break


if __name__ == "__main__":
    main()
