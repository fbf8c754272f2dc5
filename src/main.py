# main.py
import logging
import sys
from typing import List, Optional

from core.vector import Vec3
from renderer.config import GradientConfiguration, load_configuration
from renderer.exceptions import GradientError
from renderer.gradient import render
from renderer.image_writer import write_image


def print_vector_demo(vector1: Vec3, vector2: Vec3) -> None:
    print(f"Vector 1 value is {vector1}")
    print(f"Vector 2 value is {vector2}")
    print(f"Vector addition result is {vector1 + vector2}")
    print(f"Vector substraction result is {vector1 - vector2}")


def render_gradient(configuration: GradientConfiguration) -> bool:
    """
    Render the gradient and write it once. Reports the outcome on stdout
    and returns whether the write succeeded.
    """
    image = render(configuration)
    try:
        write_image(image, configuration.output_path)
    except GradientError as e:
        print(f"Error writing image: {e}")
        return False
    print(f"Image written to {configuration.output_path}")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    if argv is None:
        argv = sys.argv[1:]

    try:
        configuration = load_configuration(argv[0] if argv else None)
    except GradientError as e:
        print(f"Error loading configuration: {e}")
        return 1

    print_vector_demo(Vec3(1.0, 2.0, 3.0), Vec3(0.5, 0.3, 0.2))

    if not render_gradient(configuration):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
