import logging
from typing import List, Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from anagrams.game.errors import NoQualifyingWordError
from anagrams.game.models import GameConfig, Round
from anagrams.game.session import GameSession
from anagrams.words.index import AnagramIndex

app = typer.Typer(help="Anagrams: find anagrams and play the one-more-letter word game.")
console = Console()

def setup_logging(log_level: str):
    level = getattr(logging, log_level.upper(), logging.WARNING)
    root = logging.getLogger()
    root.setLevel(level)
    # Don't double-add handlers when invoked repeatedly (tests)
    if not root.handlers:
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))

@app.callback()
def main(
    ctx: typer.Context,
    dictionary_file: str = typer.Option("words.txt", "--dictionary", help="Path to word list, one word per line"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to JSON game settings"),
    min_anagrams: Optional[int] = typer.Option(None, help="Override the minimum anagram count for starter words"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
):
    """
    Loads the dictionary shared by every command.
    """
    setup_logging(log_level)

    try:
        config = GameConfig.from_file(config_file) if config_file else GameConfig()
        if min_anagrams is not None:
            config = GameConfig.model_validate({**config.model_dump(), "min_anagrams": min_anagrams})
    except (OSError, ValueError) as e:
        # JSONDecodeError and pydantic's ValidationError are both ValueErrors
        console.print(f"[red]Error: invalid game settings: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    try:
        index = AnagramIndex.from_file(dictionary_file, config=config)
    except FileNotFoundError:
        console.print(f"[red]Error: {dictionary_file} not found.[/red]")
        raise typer.Exit(code=1)

    ctx.obj = index

@app.command()
def anagrams(ctx: typer.Context, word: str):
    """
    Lists the dictionary words made of exactly the letters of WORD.
    """
    _print_words(f"Anagrams of {word}", ctx.obj.anagrams_of(word.lower()))

@app.command()
def extend(ctx: typer.Context, word: str):
    """
    Lists the anagrams of WORD with one extra letter.
    """
    _print_words(f"{word} + one letter", ctx.obj.anagrams_with_one_more_letter(word.lower()))

@app.command()
def check(ctx: typer.Context, guess: str, base: str):
    """
    Tells whether GUESS is an acceptable answer for the starter word BASE.
    """
    if ctx.obj.is_valid_guess(guess.lower(), base):
        console.print(f"[green]{guess} is a valid guess for {base}[/green]")
    else:
        console.print(f"[red]{guess} is not a valid guess for {base}[/red]")

@app.command()
def starter(ctx: typer.Context, count: int = typer.Option(1, help="How many starter words to pick")):
    """
    Picks starter words, each one letter longer than the last.
    """
    index = ctx.obj
    for _ in range(count):
        length = index.target_word_length
        try:
            word = index.pick_starter_word()
        except NoQualifyingWordError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        console.print(f"{length}: [bold cyan]{word}[/bold cyan]")

@app.command()
def play(ctx: typer.Context):
    """
    Plays rounds interactively. An empty guess ends the round, 'quit' exits.
    """
    session = GameSession(ctx.obj)
    while True:
        try:
            current = session.start_round()
        except NoQualifyingWordError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)

        console.print(
            f"\nRound {current.round_number}: find words made from "
            f"[bold cyan]{current.starter_word.upper()}[/bold cyan] plus one letter "
            f"({len(current.answers)} to find)"
        )
        if not _play_round(session, current):
            break

def _play_round(session: GameSession, current: Round) -> bool:
    while session.remaining():
        guess = typer.prompt("guess", default="", show_default=False).strip()
        if guess.lower() == "quit":
            _print_words("Missed", session.remaining())
            return False
        if not guess:
            break

        result = session.guess(guess)
        if result.is_correct:
            console.print(f"[green]{result.word}! {result.remaining} left[/green]")
        elif result.status == "duplicate":
            console.print(f"[yellow]Already found {result.word}[/yellow]")
        elif result.status == "invalid":
            console.print(f"[red]{result.word} is not allowed[/red]")
        else:
            console.print(f"[red]{result.word} is not an anagram of {current.starter_word} plus one letter[/red]")

    _print_words("Missed", session.remaining())
    return True

def _print_words(title: str, words: List[str]):
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Word", style="cyan")
    for i, w in enumerate(words):
        table.add_row(str(i + 1), w)
    console.print(table)

if __name__ == "__main__":
    app()
