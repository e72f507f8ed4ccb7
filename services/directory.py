from typing import Dict, List

from domain.models import Account, Center, Doctor, Role

ALL_SPECIALTIES = 'All'


def donors(accounts: List[Account]) -> List[Account]:
    return [a for a in accounts if a.role == Role.DONOR]


def filter_donors(accounts: List[Account], blood_type: str = '', location: str = '') -> List[Account]:
    needle = (location or '').lower()
    out = []
    for d in donors(accounts):
        if blood_type and d.blood_type != blood_type:
            continue
        if needle and needle not in (d.location or '').lower():
            continue
        out.append(d)
    return out


def specialties(doctors: List[Doctor]) -> List[str]:
    seen = []
    for d in doctors:
        if d.specialty not in seen:
            seen.append(d.specialty)
    return [ALL_SPECIALTIES] + seen


def filter_doctors(doctors: List[Doctor], search: str = '', specialty: str = ALL_SPECIALTIES) -> List[Doctor]:
    needle = (search or '').lower()
    return [
        d for d in doctors
        if (needle in d.name.lower() or needle in d.hospital.lower())
        and (specialty in ('', ALL_SPECIALTIES) or d.specialty == specialty)
    ]


def filter_centers(centers: List[Center], query: str = '') -> List[Center]:
    needle = (query or '').strip().lower()
    if not needle:
        return list(centers)
    return [c for c in centers if needle in c.name.lower() or needle in c.address.lower()]


def admin_stats(accounts: List[Account]) -> Dict[str, int]:
    """Headline numbers for the admin overview (donation totals count donors only)."""
    donor_list = donors(accounts)
    return {
        'total_users': len(accounts),
        'total_donors': len(donor_list),
        'total_donations': sum(d.total_donations for d in donor_list),
        'lives_saved': sum(d.lives_saved for d in donor_list),
    }


def donor_tier(account: Account) -> str:
    return 'Elite Donor' if account.total_donations > 10 else 'New Donor'


def initials(name: str) -> str:
    parts = (name or '').split()
    return ''.join(p[0] for p in parts[:2]).upper()
