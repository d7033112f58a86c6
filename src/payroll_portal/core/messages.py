"""User-facing messages (Bengali), surfaced verbatim in `error`/`message`."""

ALL_FIELDS_REQUIRED = "সমস্ত ফিল্ড পূরণ করুন"
INPUT_TOO_LONG = "ইনপুট অত্যধিক লম্বা"
INVALID_ID = "অবৈধ আইডি ফরম্যাট"
INVALID_NUMBER = "অবৈধ সংখ্যা"
INVALID_DATE = "অবৈধ তারিখ ফরম্যাট"
INVALID_MONTH = "অবৈধ মাস ফরম্যাট"
PASSWORD_TOO_SHORT = "পাসওয়ার্ড কমপক্ষে ৬ অক্ষরের হতে হবে"
ID_TAKEN = "এই আইডি ইতিমধ্যে নিবন্ধিত আছে"
WRONG_CREDENTIALS = "ভুল আইডি বা পাসওয়ার্ড"
TOKEN_REQUIRED = "অননুমোদিত অ্যাক্সেস - টোকেন প্রয়োজন"
TOKEN_INVALID = "অননুমোদিত অ্যাক্সেস - অবৈধ টোকেন"
ROUTE_NOT_FOUND = "এন্ডপয়েন্ট খুঁজে পাওয়া যায়নি"
DATE_REQUIRED = "তারিখ প্রয়োজন"
PROFILE_NOT_FOUND = "প্রোফাইল পাওয়া যায়নি"
NO_RECORDS_FOR_MONTH = "এই মাসের কোন রেকর্ড নেই"
RECORD_NOT_FOUND = "রেকর্ড খুঁজে পাওয়া যায়নি"
GROSS_TOO_LOW = "অবৈধ সংখ্যা - মোট বেতন নির্ধারিত ভাতার চেয়ে বেশি হতে হবে"
TOO_MANY_REQUESTS = "অনেক বেশি অনুরোধ। দয়া করে কিছুক্ষণ অপেক্ষা করুন।"
SERVER_ERROR = "সার্ভার ত্রুটি। পরে আবার চেষ্টা করুন।"

SERVER_RUNNING = "Server is running"
LOGGED_OUT = "সফলভাবে লগআউট হয়েছে"
PROFILE_SAVED = "প্রোফাইল সংরক্ষিত হয়েছে"
PRESENT_SAVED = "উপস্থিতি রেকর্ড হয়েছে"
ABSENT_SAVED = "অনুপস্থিতি রেকর্ড হয়েছে"
HOLIDAY_SAVED = "ছুটি রেকর্ড হয়েছে"
RECORD_DELETED = "রেকর্ড মুছে ফেলা হয়েছে"

# Fragments that mark an unexpected exception message as safe to surface.
SAFE_MESSAGE_MARKERS = ("সমস্ত", "অবৈধ", "ইনপুট")
