"""Account classification by name.

Account types are inferred from keywords in the account name rather than
from a chart of accounts. Rules are evaluated in order and the first match
wins, so "Short Term Loan" is a current liability ("short") even though it
also contains "loan".
"""

from ledgerbook.domain.entities import AccountType

CLASSIFICATION_RULES: tuple[tuple[tuple[str, ...], AccountType], ...] = (
    (("cash", "bank", "receivable", "inventory"), AccountType.CURRENT_ASSET),
    (("equipment", "building", "land", "furniture"), AccountType.FIXED_ASSET),
    (("payable", "accrued", "short"), AccountType.CURRENT_LIABILITY),
    (("loan", "mortgage", "bond"), AccountType.LONG_TERM_LIABILITY),
    (("capital", "equity", "retained"), AccountType.EQUITY),
    (("sales", "revenue", "income"), AccountType.REVENUE),
    (("cost", "cogs"), AccountType.COST_OF_GOODS_SOLD),
)

DEFAULT_ACCOUNT_TYPE = AccountType.EXPENSE


def classify_account(account_name: str) -> AccountType:
    """Infer the account type of an account name.

    Matching is case-insensitive substring containment. Names matching no
    rule are expenses.

    Args:
        account_name: Account name as used in transactions

    Returns:
        Inferred AccountType
    """
    name = account_name.lower()
    for keywords, account_type in CLASSIFICATION_RULES:
        if any(keyword in name for keyword in keywords):
            return account_type
    return DEFAULT_ACCOUNT_TYPE
