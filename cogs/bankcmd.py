import asyncio
import logging

from discord.ext import commands

from src.models.exceptions import BankError
from src.services.transfer_service import TransferRequest
from src.utils.formatting import accounts_table, banks_table, history_page
from src.utils.money import format_amount
from src.utils.pagination import total_pages

logger = logging.getLogger(__name__)


def _block(text):
    return '```' + text + '```'


class bankcmd(commands.Cog):
    def __init__(self, bot):
        self.bot = bot

    @property
    def ledger(self):
        return self.bot.ledger

    async def _current_user(self, ctx):
        user = self.ledger.logged_in_user()
        if user is None:
            await ctx.send(_block('Nobody is logged in, please $login.'))
        return user

    @commands.command(name='login', help='$login email password  sign in for the whole bot (one shared session, not per member)')
    async def login(self, ctx, email: str, password: str):
        try:
            user = self.ledger.sign_in(email, password)
        except BankError as err:
            await ctx.send(_block(str(err)))
        else:
            await ctx.send(_block(f'Welcome back, {user.full_name}!'))

    @commands.command(name='logout', help='$logout  end the shared session; commands fall back to the demo user')
    async def logout(self, ctx):
        self.ledger.logout()
        await ctx.send(_block('Logged out.'))

    @commands.command(name='accounts', help='$accounts  balances of all linked accounts')
    async def accounts(self, ctx):
        user = await self._current_user(ctx)
        if user is None:
            return
        summary = self.ledger.list_accounts(user.id)
        await ctx.send(_block(accounts_table(summary)))

    @commands.command(name='banks', help='$banks  bank links and their shareable ids')
    async def banks(self, ctx):
        user = await self._current_user(ctx)
        if user is None:
            return
        await ctx.send(_block(banks_table(self.ledger.list_banks(user.id))))

    @commands.command(name='history', help='$history bank_id(Optional) page(Optional)  transaction history')
    async def history(self, ctx, bank_id: str = '', page: int = 1):
        user = await self._current_user(ctx)
        if user is None:
            return
        if not bank_id:
            summary = self.ledger.list_accounts(user.id)
            if not summary.accounts:
                await ctx.send(_block('No linked accounts, please $link.'))
                return
            bank_id = summary.accounts[0].bank_id
        try:
            detail = self.ledger.get_account(bank_id)
        except BankError as err:
            await ctx.send(_block(str(err)))
            return

        page_size = self.bot.settings.page_size
        pages = total_pages(len(detail.transactions), page_size)
        page = min(max(page, 1), pages)
        title = f'{detail.account.name} ****{detail.account.mask}\n\n'
        msg = await ctx.send(_block(title + history_page(detail.transactions, page, page_size)))
        await msg.add_reaction('⬅️')
        await msg.add_reaction('➡️')

        def check(reaction, user):
            return user == ctx.author and reaction.message.id == msg.id
        while True:
            try:
                reaction, reactor = await self.bot.wait_for('reaction_add', timeout=1800.0, check=check)
            except asyncio.TimeoutError:
                break
            else:
                if reaction.emoji == '⬅️' and page > 1:
                    page -= 1
                elif reaction.emoji == '➡️' and page < pages:
                    page += 1
                await reaction.remove(reactor)
                await msg.edit(content=_block(title + history_page(detail.transactions, page, page_size)))

    @commands.command(name='send', help='$send from_bank_id receiver_shareable_id amount memo(Optional)  transfer money from the signed-in user (or the demo user if nobody is signed in); any member can use this session')
    async def send(self, ctx, sender_bank_id: str, receiver_shareable_id: str, amount: str, *, memo: str = ''):
        sender = await self._current_user(ctx)
        if sender is None:
            return
        try:
            sender_bank = self.ledger.banks.get_bank(sender_bank_id)
            receiver_bank = self.ledger.get_bank_by_shareable_id(receiver_shareable_id)
            receiver = self.ledger.users.get_user(receiver_bank.user_id)
        except BankError as err:
            await ctx.send(_block(str(err)))
            return
        if sender_bank.user_id != sender.id:
            await ctx.send(_block(f'Bank {sender_bank_id} does not belong to you.'))
            return

        msg = await ctx.send(_block(
            f'You will send {receiver.full_name} {amount}, press ✅ to confirm, ❌ to cancel.'
        ))
        await msg.add_reaction('✅')
        await msg.add_reaction('❌')

        def check(reaction, user):
            return user == ctx.author and reaction.message.id == msg.id
        while True:
            try:
                reaction, user = await self.bot.wait_for(
                    'reaction_add', timeout=self.bot.settings.confirm_timeout, check=check
                )
            except asyncio.TimeoutError:
                await ctx.send('Time out')
                return
            else:
                if reaction.emoji == '✅':
                    break
                elif reaction.emoji == '❌':
                    await ctx.send('Action canceled!')
                    return

        request = TransferRequest(
            sender_bank_id=sender_bank.id,
            receiver_bank_id=receiver_bank.id,
            amount=amount,
            label=memo or f'Transfer to {receiver.full_name}',
            sender_user_id=sender.id,
            receiver_user_id=receiver.id,
            email=receiver.email,
        )
        try:
            transfer = self.ledger.transfer(request)
        except BankError as err:
            await ctx.send(_block(str(err)))
        else:
            await ctx.send(_block(
                f'{sender.full_name} has sent {receiver.full_name} {format_amount(transfer.amount)}.'
            ))

    @commands.command(name='link', help='$link institution_id(Optional)  open and link a new account')
    async def link(self, ctx, institution_id: str = ''):
        user = await self._current_user(ctx)
        if user is None:
            return
        try:
            bank = self.ledger.link_new_account(user.id, institution_id or None)
        except BankError as err:
            await ctx.send(_block(str(err)))
        else:
            await ctx.send(_block(f'Linked new account as bank {bank.id}.'))


async def setup(bot):
    await bot.add_cog(bankcmd(bot))
    logger.info('bankcmd is loaded')
