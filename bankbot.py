import logging

import discord
from discord.ext import commands
from dotenv import load_dotenv

from config.settings import Settings
from src.ledger import Ledger

load_dotenv()

# Load settings from environment variables
settings = Settings.load()

handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
for name, level in (('discord', logging.INFO), ('src', logging.DEBUG), ('cogs', logging.DEBUG)):
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.addHandler(handler)

extensions = (
    "cogs.bankcmd",
    )

intents = discord.Intents.default()
intents.message_content = True


class BankBot(commands.Bot):
    def __init__(self, *args, **kwargs):
        self.settings = kwargs.pop('settings')
        super().__init__(*args, **kwargs)
        self.ledger = Ledger.create(self.settings)

    async def setup_hook(self):
        for extension in extensions:
            await self.load_extension(extension)

    async def close(self):
        await super().close()
        self.ledger.close()


if __name__ == '__main__':
    LedgerBot = BankBot(
        command_prefix=settings.command_prefix,
        intents=intents,
        settings=settings,
    )
    LedgerBot.run(settings.discord_token, log_handler=None)
