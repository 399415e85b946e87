import json
import sys
import requests
from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Prompt, IntPrompt
from rich.panel import Panel
from rich.table import Table
from rich import print as rprint

load_dotenv()

from app.config import SERVER_URL

console = Console()


class MotdClientError(Exception):
    def __init__(self, status_code, message):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class MotdClient:
    """Small wrapper around the /v1/message endpoints"""

    def __init__(self, base_url=SERVER_URL, session=None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    def _url(self, path=''):
        return f"{self.base_url}/v1/message/{path}"

    def _check(self, res, expected):
        if res.status_code != expected:
            raise MotdClientError(res.status_code, res.text.strip())
        return res

    def ping(self):
        res = self.session.get(f"{self.base_url}/api/ping", timeout=5)
        return res.status_code == 200

    def list_messages(self):
        return self._check(self.session.get(self._url()), 200).json()

    def get_message(self, index):
        return self._check(self.session.get(self._url(str(index))), 200).json()

    def random_message(self):
        """Returns None when the server has no messages"""
        res = self.session.get(self._url('random'))
        if res.status_code == 204:
            return None
        return self._check(res, 200).json()

    def add_message(self, message):
        res = self.session.post(
            self._url(),
            data=json.dumps(message),
            headers={'Content-Type': 'application/json'}
        )
        self._check(res, 201)


def show_messages(client):
    table = Table(title="Messages of the day")
    table.add_column("#", justify="right")
    table.add_column("Message")
    for ix, motd in enumerate(client.list_messages()):
        table.add_row(str(ix), motd)
    console.print(table)


def show_message(client):
    index = IntPrompt.ask("Message index")
    rprint(Panel(client.get_message(index), title=f"#{index}"))


def show_random(client):
    motd = client.random_message()
    if motd is None:
        rprint("[yellow]No messages yet[/yellow]")
    else:
        rprint(Panel(motd, title="Message of the day"))


def add_message(client):
    message = Prompt.ask("Enter your message")
    if not message.strip():
        rprint("[red]Message cannot be empty[/red]")
        return
    client.add_message(message)
    rprint("[green]Message added[/green]")


def show_menu():
    rprint(Panel(
        "motd client\n" +
        "1. List messages\n" +
        "2. Show message by index\n" +
        "3. Random message\n" +
        "4. Add message\n" +
        "5. Quit",
        title="Menu"
    ))


def main():
    client = MotdClient()
    try:
        if not client.ping():
            rprint(f"[red]Server at {client.base_url} is not healthy[/red]")
            sys.exit(1)
    except requests.exceptions.ConnectionError:
        rprint(f"[red]Could not connect to {client.base_url}[/red]")
        sys.exit(1)

    actions = {
        "1": show_messages,
        "2": show_message,
        "3": show_random,
        "4": add_message,
    }

    while True:
        show_menu()
        choice = Prompt.ask("Choose an option", choices=["1", "2", "3", "4", "5"])
        if choice == "5":
            break
        try:
            actions[choice](client)
        except MotdClientError as e:
            rprint(f"[red]Request failed: {e}[/red]")
        except requests.exceptions.RequestException as e:
            rprint(f"[red]Connection problem: {e}[/red]")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        console.print()
