from collections import defaultdict


def build_pricing_schedule(tiers, discounts):
    """Group discounts by cutoff date for display.

    One entry per cutoff date (ascending). Each entry lists every tier in
    tier order with its regular amount and, where a discount exists for that
    date, the discounted amount.
    """
    ordered_tiers = sorted(tiers, key=lambda t: (t.order, t.label))

    by_date = defaultdict(dict)
    for d in discounts:
        by_date[d.cutoff_date][d.price_tier_id] = d.discounted_amount

    schedule = []
    for cutoff in sorted(by_date):
        prices = []
        for tier in ordered_tiers:
            prices.append({
                "tier_id": tier.id,
                "label": tier.label,
                "regular_amount": round(tier.amount, 2),
                "discounted_amount": by_date[cutoff].get(tier.id),
            })
        schedule.append({"cutoff_date": cutoff, "prices": prices})

    return schedule
