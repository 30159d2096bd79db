from asciibox import Display, Element, FlexAlign, Screen, setup_logging
from rich import print


def card(height: int, width: int) -> Element:
    return Element(height, width).set_border()


def main() -> None:
    setup_logging()

    for justify in FlexAlign:
        row = (
            Element(5, 30)
            .set_border()
            .set_display(Display.FLEX)
            .set_justify_content(justify)
            .set_align_items(FlexAlign.CENTER)
        )
        row.insert_children([card(1, 4), card(3, 6)])
        print(f"[bold]{justify.value}[/bold]")
        Screen(row).draw()

    gallery = Element(8, 24).set_border().set_display(Display.INLINE)
    gallery.insert_children([card(1, 5) for _ in range(6)])
    print("[bold]inline[/bold]")
    Screen(gallery).draw()


if __name__ == "__main__":
    main()
