from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any
import datetime as _dt


def _now_iso():
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0).isoformat().replace('+00:00', 'Z')


class Role(str, Enum):
    DONOR = 'DONOR'
    ADMIN = 'ADMIN'
    HOSPITAL = 'HOSPITAL'


class AccountStatus(str, Enum):
    ACTIVE = 'Active'
    INACTIVE = 'Inactive'


@dataclass
class Account:
    id: str
    name: str
    email: str
    password: str
    role: Role
    blood_type: str = 'Unknown'
    total_donations: int = 0
    lives_saved: int = 0
    last_donation_date: str = 'Never'
    location: str = ''
    status: AccountStatus = AccountStatus.ACTIVE

    @property
    def first_name(self) -> str:
        parts = self.name.split()
        return parts[0] if parts else self.name


# Stored (camelCase) key -> attribute name. Order fixes the serialized layout.
_ACCOUNT_FIELDS = {
    'id': 'id',
    'name': 'name',
    'email': 'email',
    'password': 'password',
    'bloodType': 'blood_type',
    'role': 'role',
    'totalDonations': 'total_donations',
    'livesSaved': 'lives_saved',
    'lastDonationDate': 'last_donation_date',
    'location': 'location',
    'status': 'status',
}


def account_from_dict(d: Dict[str, Any]) -> Account:
    """Safe conversion from a stored record, dropping unknown keys.

    Raises KeyError / ValueError / TypeError when a required field is missing or
    has the wrong shape; callers decide how to recover.
    """
    if not isinstance(d, dict):
        raise TypeError(f"account record must be an object, got {type(d).__name__}")
    kwargs = {attr: d[key] for key, attr in _ACCOUNT_FIELDS.items() if key in d}
    kwargs['role'] = Role(kwargs['role'])
    if 'status' in kwargs:
        kwargs['status'] = AccountStatus(kwargs['status'])
    for counter in ('total_donations', 'lives_saved'):
        if counter in kwargs:
            value = int(kwargs[counter])
            if value < 0:
                raise ValueError(f"{counter} must be >= 0")
            kwargs[counter] = value
    kwargs.setdefault('password', '')
    if kwargs.get('location') is None:
        kwargs['location'] = ''
    return Account(**kwargs)


def account_to_dict(account: Account) -> Dict[str, Any]:
    out = {}
    for key, attr in _ACCOUNT_FIELDS.items():
        value = getattr(account, attr)
        if isinstance(value, Enum):
            value = value.value
        out[key] = value
    return out


@dataclass(frozen=True)
class Center:
    id: str
    name: str
    address: str
    distance: str
    open_until: str
    rating: float


def center_from_dict(d: Dict[str, Any]) -> Center:
    return Center(id=d['id'], name=d['name'], address=d['address'], distance=d['distance'],
                  open_until=d['openUntil'], rating=float(d['rating']))


@dataclass(frozen=True)
class Doctor:
    id: str
    name: str
    specialty: str
    hospital: str
    rating: float
    experience: str = ''
    availability: str = ''
    image: str = ''


def doctor_from_dict(d: Dict[str, Any]) -> Doctor:
    allowed = {'id', 'name', 'specialty', 'hospital', 'rating', 'experience', 'availability', 'image'}
    return Doctor(**{k: v for k, v in d.items() if k in allowed})


@dataclass
class ChatMessage:
    id: str
    role: str  # user | model
    text: str
    timestamp: str = field(default_factory=_now_iso)
