from asciibox import Element, Screen, TextElement, WordCase


def main() -> None:
    page = Element().set_border().set_padding(1, 2)

    title = TextElement().set_word_case(WordCase.UPPERCASE).set_text("system status")
    body = TextElement(3, 30).set_word_case(WordCase.NORMAL).set_text(
        "all services are running. the last deploy finished without errors."
    )

    page.insert_children([title, body])
    Screen(page).draw()


if __name__ == "__main__":
    main()
