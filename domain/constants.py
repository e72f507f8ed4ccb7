"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for storage slots, demo credentials and the
mock catalog data (seed roster, donation centers, doctors).
"""

import os

# Persisted key-value slots
USERS_SLOT = 'lifelink_users'
THEME_SLOT = 'lifelink_theme'

THEMES = ('light', 'dark')

# Universal demo password. Every account accepts it, and it is the default
# password for new registrations. Demo only.
DEMO_PASSWORD = '1234'

# Simulated latency (seconds)
LOGIN_DELAY = 0.8
DEMO_LOGIN_DELAY = 0.6

BLOOD_TYPES = ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]

NEVER_DONATED = 'Never'
UNKNOWN = 'Unknown'

# Chat collaborator
GEMINI_MODEL = os.getenv('LIFELINK_GEMINI_MODEL', 'gemini-1.5-flash')
CHAT_TIMEOUT = 30.0
CHAT_FALLBACK = "I'm sorry, I'm having trouble connecting right now. Please try again later."
CHAT_SYSTEM_INSTRUCTION = (
    "You are LifeLink AI, a friendly assistant inside a blood donation app based in Nanjing. "
    "Answer questions about donation eligibility, preparation, recovery and general health tips. "
    "Keep answers short and practical, and recommend consulting a medical professional for "
    "anything diagnostic."
)

# Seed roster used when nothing (valid) is persisted yet.
INITIAL_USERS = [
    {
        'id': '1', 'name': 'Alex Johnson', 'email': 'alex@test.com', 'password': '1234',
        'bloodType': 'O+', 'role': 'DONOR', 'totalDonations': 12, 'livesSaved': 36,
        'lastDonationDate': '2023-10-15', 'location': 'Gulou District, Nanjing', 'status': 'Active',
    },
    {
        'id': '2', 'name': 'Li Wei', 'email': 'liwei@test.com', 'password': '1234',
        'bloodType': 'A-', 'role': 'DONOR', 'totalDonations': 5, 'livesSaved': 15,
        'lastDonationDate': '2023-11-20', 'location': 'Xuanwu District, Nanjing', 'status': 'Active',
    },
    {
        'id': '3', 'name': 'Chen Yu', 'email': 'chen@test.com', 'password': '1234',
        'bloodType': 'B+', 'role': 'DONOR', 'totalDonations': 2, 'livesSaved': 6,
        'lastDonationDate': '2024-01-05', 'location': 'Jianye District, Nanjing', 'status': 'Active',
    },
    {
        'id': 'admin', 'name': 'System Admin', 'email': 'admin@lifelink.com', 'password': '1234',
        'bloodType': 'AB+', 'role': 'ADMIN', 'totalDonations': 0, 'livesSaved': 0,
        'lastDonationDate': '-', 'location': 'Nanjing HQ', 'status': 'Active',
    },
    {
        'id': 'hosp1', 'name': 'Drum Tower Hospital', 'email': 'hospital@lifelink.com', 'password': '1234',
        'bloodType': '-', 'role': 'HOSPITAL', 'totalDonations': 0, 'livesSaved': 0,
        'lastDonationDate': '-', 'location': 'Gulou District, Nanjing', 'status': 'Active',
    },
]

MOCK_CENTERS = [
    {'id': 'c1', 'name': 'Nanjing Drum Tower Hospital', 'address': '321 Zhongshan Road, Gulou District',
     'distance': '1.2 km', 'openUntil': '8:00 PM', 'rating': 4.9},
    {'id': 'c2', 'name': 'Jiangsu Province Hospital', 'address': '300 Guangzhou Road, Gulou District',
     'distance': '3.5 km', 'openUntil': '6:00 PM', 'rating': 4.8},
    {'id': 'c3', 'name': 'Nanjing First Hospital', 'address': '68 Changle Road, Qinhuai District',
     'distance': '5.1 km', 'openUntil': '5:00 PM', 'rating': 4.6},
]

MOCK_DOCTORS = [
    {'id': 'd1', 'name': 'Dr. Zhang Min', 'specialty': 'Hematology', 'hospital': 'Nanjing Drum Tower Hospital',
     'rating': 4.9, 'experience': '15 years', 'availability': 'Mon, Wed, Fri',
     'image': 'https://picsum.photos/seed/doc1/200/200'},
    {'id': 'd2', 'name': 'Dr. Wang Li', 'specialty': 'General Practice', 'hospital': 'Jiangsu Province Hospital',
     'rating': 4.7, 'experience': '9 years', 'availability': 'Tue, Thu',
     'image': 'https://picsum.photos/seed/doc2/200/200'},
    {'id': 'd3', 'name': 'Dr. Liu Yang', 'specialty': 'Cardiology', 'hospital': 'Nanjing First Hospital',
     'rating': 4.8, 'experience': '12 years', 'availability': 'Mon - Fri',
     'image': 'https://picsum.photos/seed/doc3/200/200'},
    {'id': 'd4', 'name': 'Dr. Sun Hui', 'specialty': 'Hematology', 'hospital': 'Jiangsu Province Hospital',
     'rating': 4.6, 'experience': '7 years', 'availability': 'Sat, Sun',
     'image': 'https://picsum.photos/seed/doc4/200/200'},
    {'id': 'd5', 'name': 'Dr. Zhou Qing', 'specialty': 'Nutrition', 'hospital': 'Nanjing Drum Tower Hospital',
     'rating': 4.5, 'experience': '6 years', 'availability': 'Wed, Sat',
     'image': 'https://picsum.photos/seed/doc5/200/200'},
]
