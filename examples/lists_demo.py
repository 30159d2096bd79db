import logging

from asciibox import Display, Element, Screen, SortedListElement, UnsortedListElement, setup_logging


def main() -> None:
    # DEBUG shows items that did not fit.
    setup_logging(logging.DEBUG)

    steps = SortedListElement().set_max_height(3).set_border().set_padding(0, 1)
    for item in ["Fetch sources", "Build wheel", "Run tests", "Publish"]:
        steps.add_item(item)

    notes = UnsortedListElement().set_border().set_padding(0, 1)
    notes.add_item("rich is the only runtime dependency").add_item("grids are plain characters")

    layout = Element().set_display(Display.FLEX).insert_children([steps, notes])
    Screen(layout).draw()


if __name__ == "__main__":
    main()
