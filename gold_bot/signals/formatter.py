"""Telegram HTML templates for everything the bot sends."""

from gold_bot.signals.models import Signal, SignalKind
from gold_bot.signals.sizing import round_cents

NOT_SET = "Not set"

WELCOME_TEXT = (
    "👋 Welcome to <b>Gold Signal Bot</b>!\n"
    "Use /help to see all commands."
)

HELP_TEXT = (
    "📜 <b>Commands</b>\n"
    "/buy - Market Buy\n"
    "/sell - Market Sell\n"
    "/again_buy - Again Buy\n"
    "/again_sell - Again Sell\n"
    "/limit_buy &lt;price&gt;\n"
    "/limit_sell &lt;price&gt;\n"
    "/update_tp &lt;tp&gt;  (optional)\n"
    "/update_sl &lt;sl&gt;  (optional)\n"
    "/update_tpsl &lt;tp&gt; &lt;sl&gt;\n"
    "/calc_lot &lt;balance&gt; &lt;risk%&gt;\n"
    "/set_lot &lt;lot&gt;\n"
    "/morning\n"
    "/psychology\n"
    "/daily\n"
    "/weekly"
)

MORNING_TEXT = "🌅 Morning Message\nHave a disciplined, profitable day!"
PSYCHOLOGY_TEXT = "🧠 Psychology Tip\nStick to your plan. Avoid revenge trading."
DAILY_TEXT = "📊 Daily Report\n(Write your daily summary here)"
WEEKLY_TEXT = "📈 Weekly Report\n(Write your weekly summary here)"


def format_number(value: float) -> str:
    """Render a user-supplied number the way it was typed: 3385 not 3385.0."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _value_or_not_set(value: float | None) -> str:
    return NOT_SET if value is None else format_number(value)


def compose_signal(kind: SignalKind, price: float, lot_size: float) -> str:
    return (
        f"📢 <b>Signal:</b> {kind.value}\n"
        f"💰 <b>Price:</b> {round_cents(price)}\n"
        f"🎯 <b>Lot Size:</b> {round_cents(lot_size)}"
    )


def render_signal(signal: Signal) -> str:
    return compose_signal(signal.kind, signal.price, signal.lot_size)


def compose_tp_update(tp: float | None) -> str:
    return f"✏️ <b>Update TP</b>\n🎯 <b>TP:</b> {_value_or_not_set(tp)}"


def compose_sl_update(sl: float | None) -> str:
    return f"✏️ <b>Update SL</b>\n🛑 <b>SL:</b> {_value_or_not_set(sl)}"


def compose_tpsl_update(tp: float | None, sl: float | None) -> str:
    return (
        "✏️ <b>Update TP/SL</b>\n"
        f"🎯 <b>TP:</b> {_value_or_not_set(tp)}\n"
        f"🛑 <b>SL:</b> {_value_or_not_set(sl)}"
    )


def compose_lot_calculation(balance: float, risk_pct: float, lot_size: float) -> str:
    return (
        "📊 <b>Lot Calculation</b>\n"
        f"💵 <b>Balance:</b> {format_number(balance)}\n"
        f"⚖️ <b>Risk:</b> {format_number(risk_pct)}%\n"
        f"🎯 <b>Lot Size:</b> {format_number(lot_size)}"
    )
