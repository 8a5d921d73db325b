# Published dataset shipped with the application.
#
# Seeds a fresh store on first run and is the permanent read-only view for
# guest sessions. To publish the current data, run
# scripts/publish_snapshot.py (or GET /api/backup/publishable) and replace
# this file with the generated text.

PUBLISHED_DATA = {
    'items': [],
    'quickEntryData': {
        'models': ['SAM-01', 'SAM-02'],
        'barcodes': [],
        'colors': ['أبيض', 'أحمر', 'أخضر', 'أزرق', 'أسود'],
        'materials': ['بوليستر', 'جلد', 'صوف', 'قطن'],
        'prices': [50, 75, 100, 120, 150, 200],
        'types': ['رسمية', 'رياضية', 'شتوية', 'كاجوال', 'كلاسيكية'],
        'categories': ['أحذية', 'قبعات', 'ملابس'],
        'sizes': ['L', 'M', 'S', 'XL', 'XXL'],
        'countries': ['الصين', 'تركيا', 'فيتنام', 'مصر'],
    },
    'settings': {
        'companyName': 'SAM PRO',
        'companyInfo': 'للتواصل: +963 998 171 954',
        'guestCredentials': {
            'enabled': True,
            'username': 'visitor',
            'password': '123',
        },
    },
    'companyLogo': None,
}
