"""
Auction ledger shell
"""
import json
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import click
from click_shell import shell  # type: ignore

from auction_ledger.domain.auction import AuctionId
from auction_ledger.errors import AuctionLedgerError
from auction_ledger.shell.app import App, CallerNotLoggedIn

__app: App | None = None
__config_file: Path | None = None


class AppNotInitialized(Exception):
    """
    Shell command was run before the app was loaded from the config file
    """


@contextmanager
def ledger_errors() -> Iterator[None]:
    """
    Reports rejected ledger requests to the user
    """
    try:
        yield
    except (AuctionLedgerError, CallerNotLoggedIn, ValueError) as err:
        raise click.ClickException(str(err)) from err


@shell(
    prompt="auction-ledger > ",
    intro="Auction Ledger Shell",
)
@click.option(
    "--config-file",
    required=True,
    prompt="Config File",
    type=click.Path(exists=True, resolve_path=True, readable=True, path_type=Path),
)
def app(config_file: Path | None = None):
    if config_file is None:
        return

    global __app
    global __config_file

    __app = App.from_config_file(config_file)
    __config_file = config_file


@app.command
def show_config():
    """
    Displays the application config as JSON
    """

    if __app is None:
        raise AppNotInitialized

    click.echo(__config_file)
    click.echo(json.dumps(__app.config.to_dict(), indent=3))


@app.command
@click.option(
    "--caller", required=True, prompt="Caller", help="Algorand account address"
)
def login(caller: str):
    """
    Sets the caller that ledger requests are made on behalf of.
    """

    if __app is None:
        raise AppNotInitialized

    with ledger_errors():
        __app.login(caller)


@app.command
def logout():
    """
    Clears the logged in caller.
    """

    if __app is None:
        raise AppNotInitialized

    __app.logout()


@app.command
def whoami():
    """
    Displays the logged in caller.
    """

    if __app is None:
        raise AppNotInitialized

    if __app.caller is None:
        raise click.ClickException(str(CallerNotLoggedIn()))

    click.echo(__app.caller)


@app.command
@click.option("--item", required=True, prompt="Item", help="Item description")
@click.option(
    "--min-bid",
    required=True,
    prompt="Minimum Bid",
    help="Bids must be greater than the minimum bid",
    type=click.INT,
)
def create_auction(item: str, min_bid: int):
    """
    Creates an auction. The logged in caller is the seller.
    """

    if __app is None:
        raise AppNotInitialized

    with ledger_errors():
        auction_id = __app.create_auction(item.strip(), min_bid)
    click.echo(f"Auction ID: {auction_id}")


@app.command
@click.option("--auction-id", required=True, prompt="Auction ID", type=click.INT)
@click.option("--amount", required=True, prompt="Amount", type=click.INT)
def place_bid(auction_id: int, amount: int):
    """
    Places a bid on behalf of the logged in caller.
    """

    if __app is None:
        raise AppNotInitialized

    with ledger_errors():
        __app.place_bid(AuctionId(auction_id), amount)
    click.echo("Bid was accepted.")


@app.command
@click.option("--auction-id", required=True, prompt="Auction ID", type=click.INT)
def close_auction(auction_id: int):
    """
    Closes the auction and displays the winner.
    """

    if __app is None:
        raise AppNotInitialized

    if not click.confirm("Please confirm to close the auction"):
        click.echo("Closing the auction has been cancelled")
        return

    with ledger_errors():
        winner = __app.close_auction(AuctionId(auction_id))
    if winner is None:
        click.echo("Auction closed with no winner.")
    else:
        click.echo(f"Winner: {winner}")


@app.command
@click.option("--auction-id", required=True, prompt="Auction ID", type=click.INT)
def cancel_auction(auction_id: int):
    """
    Cancels the auction. Only the seller can cancel the auction.
    """

    if __app is None:
        raise AppNotInitialized

    if not click.confirm("Please confirm to cancel the auction"):
        return

    with ledger_errors():
        __app.cancel_auction(AuctionId(auction_id))
    click.echo("Auction has been cancelled.")


@app.command
@click.option("--auction-id", required=True, prompt="Auction ID", type=click.INT)
def get_auction(auction_id: int):
    """
    Displays the auction as JSON
    """

    if __app is None:
        raise AppNotInitialized

    auction = __app.get_auction(AuctionId(auction_id))
    if auction is None:
        raise click.ClickException(f"auction does not exist: auction_id={auction_id}")

    click.echo(
        json.dumps(
            {
                "auction_id": auction_id,
                "seller": auction.seller,
                "item": auction.item,
                "min_bid": auction.min_bid,
                "status": auction.status.name,
                "winner": auction.winner,
                "bids": [
                    {"bidder": bid.bidder, "amount": bid.amount}
                    for bid in auction.bids
                ],
            },
            indent=3,
        )
    )


@app.command
def health_check():
    """
    Runs the database health check
    """

    if __app is None:
        raise AppNotInitialized

    result = __app.health_check()
    click.echo(f"{result.name}: {result.status.name} ({result.duration})")
    if result.error:
        click.echo(f"Error: {result.error!r}")


if __name__ == "__main__":
    app()
