"""
Settlement Reconciliation Module
=================================

Pure functions that turn a room's expense and settlement history into
per-member contributions, the per-head fair share and each member's
balance. Nothing here touches the database; callers fetch a fresh snapshot
and pass plain ``(payer_id, amount)`` pairs in.

Settlements are not tied to the creditor they pay off. All settlement money
goes into one pool which is handed back to creditors in proportion to how
much each of them was owed. There is no pairwise who-owes-whom tracking.

Functions:
    compute_balances: Contributions, total and per-head share for a room.
    balance_for: What one member owes (positive) or is owed (negative).
    amount_owed: The settle-up amount for one member.
    chart_data: Display-name -> contribution mapping for charts.

Example:
    Three members, A paid 300 and B has settled 100::

        >>> balances = compute_balances(
        ...     ['a', 'b', 'c'],
        ...     expenses=[('a', Decimal('300'))],
        ...     settlements=[('b', Decimal('100'))],
        ... )
        >>> balances['per_head']
        Decimal('100')
        >>> [balance_for(balances, m) for m in ('a', 'b', 'c')]
        [Decimal('-100'), Decimal('0'), Decimal('100')]

Note:
    All arithmetic is ``Decimal`` at full context precision. Rounding to the
    minor currency unit happens only when a value is stored or rendered.
"""

from decimal import Decimal
from typing import Dict, Hashable, Iterable, Tuple

ZERO = Decimal('0')

Entry = Tuple[Hashable, Decimal]


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def compute_balances(
    member_ids: Iterable[Hashable],
    expenses: Iterable[Entry],
    settlements: Iterable[Entry],
) -> Dict:
    """
    Compute every member's effective contribution to the shared pool.

    Algorithm:
        1. Each member starts at 0 and accumulates the expenses they paid.
           ``total`` sums every expense, including ones paid by people who
           are no longer members. ``per_head = total / member_count``.
        2. Members whose contribution exceeds ``per_head`` are creditors;
           their credit is the overpayment. ``total_debt`` sums the credits.
        3. When ``total_debt > 0`` each creditor's contribution is reduced by
           ``credit / total_debt * total_settled``.
        4. Every settlement amount is added to its payer's contribution.

    Args:
        member_ids: Ids of the room's current members. Order is irrelevant.
        expenses: ``(payer_id, amount)`` pairs for every expense in the room.
        settlements: ``(payer_id, amount)`` pairs for every settlement.

    Returns:
        dict: A new dictionary on each call containing:
            - contributions (dict): member id -> Decimal contribution.
            - total (Decimal): Sum of all expense amounts.
            - per_head (Decimal): Fair share per member, 0 with no members.

    Note:
        With no creditors (``total_debt == 0``) settlements are still added
        to their payers without being taken from anyone, so contributions
        may no longer sum to ``total``. That is accepted behaviour.
    """
    contributions = {member_id: ZERO for member_id in member_ids}
    expenses = [(payer_id, _as_decimal(amount)) for payer_id, amount in expenses]
    settlements = [(payer_id, _as_decimal(amount)) for payer_id, amount in settlements]

    # 1. Base contributions
    total = ZERO
    for payer_id, amount in expenses:
        total += amount
        if payer_id in contributions:
            contributions[payer_id] += amount

    per_head = total / len(contributions) if contributions else ZERO

    # 2. Creditors
    credits = {}
    for member_id, contribution in contributions.items():
        credit = contribution - per_head
        if credit > 0:
            credits[member_id] = credit
    total_debt = sum(credits.values(), ZERO)

    # 3. Settlement pool shared out to creditors
    total_settled = sum((amount for _, amount in settlements), ZERO)
    if total_debt > 0:
        for member_id, credit in credits.items():
            contributions[member_id] -= credit / total_debt * total_settled

    # 4. Settlement payers get credited
    for payer_id, amount in settlements:
        if payer_id in contributions:
            contributions[payer_id] += amount

    return {
        'contributions': contributions,
        'total': total,
        'per_head': per_head,
    }


def balance_for(balances: Dict, member_id: Hashable) -> Decimal:
    """
    How much ``member_id`` owes the group.

    Positive means the member owes; zero or negative means settled or owed.
    Unknown members are treated as having contributed nothing.
    """
    contribution = balances['contributions'].get(member_id, ZERO)
    return balances['per_head'] - contribution


def amount_owed(
    member_id: Hashable,
    per_head: Decimal,
    expenses: Iterable[Entry],
    settlements: Iterable[Entry],
) -> Decimal:
    """
    Settle-up amount: ``per_head`` minus what the member paid in directly.

    Only the member's own expenses and own settlements count; the pooled
    redistribution of ``compute_balances`` plays no part here.
    """
    paid = sum(
        (_as_decimal(amount) for payer_id, amount in expenses if payer_id == member_id),
        ZERO,
    )
    settled = sum(
        (_as_decimal(amount) for payer_id, amount in settlements if payer_id == member_id),
        ZERO,
    )
    return per_head - (paid + settled)


def chart_data(
    balances: Dict,
    members: Iterable[Tuple[Hashable, str]],
    threshold: Decimal,
) -> Dict[str, Decimal]:
    """
    Map display names to contributions strictly above ``threshold``.

    Args:
        balances: Result of ``compute_balances``.
        members: ``(member_id, display_name)`` pairs.
        threshold: Contributions at or below this are left out.
    """
    data = {}
    for member_id, name in members:
        contribution = balances['contributions'].get(member_id, ZERO)
        if contribution > threshold:
            data[name] = contribution
    return data
