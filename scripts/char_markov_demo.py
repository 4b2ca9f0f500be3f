from __future__ import annotations

from char_markov import MarkovModel
from char_markov.report import model_to_frame


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
    )

    model = MarkovModel(window_length=4, seed=20)
    model.train(text)

    print(model_to_frame(model).head(10).to_string(index=False))
    print()
    print(model.generate("natu", 120))


if __name__ == "__main__":
    main()
