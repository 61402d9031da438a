import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


LANDING_HTML = """
<html><body>
<form method="post" action="./" id="form1">
  <input type="hidden" name="__VIEWSTATE" id="__VIEWSTATE" value="vs-token" />
  <input type="hidden" name="__VIEWSTATEGENERATOR" id="__VIEWSTATEGENERATOR" value="CA0B0334" />
  <input type="hidden" name="__EVENTVALIDATION" id="__EVENTVALIDATION" value="ev-token" />
  <input name="txtbSearch" type="text" id="txtbSearch" />
</form>
</body></html>
"""

# Two date headers, three data rows, steps out of document order
RESULT_HTML = """
<html><body>
<div id="pnlResult" class="container">
  <div class="row"><div class="col-12 newtdheader">سه‌شنبه 24 تیر ماه 1404</div></div>
  <div class="row newrowdata">
    <div class="newtddata">2</div>
    <div class="newtddata">مرسوله پردازش شد</div>
    <div class="newtddata">مرکز مبادلات تهران</div>
    <div class="newtddata">14:20:31</div>
  </div>
  <div class="row newrowdata">
    <div class="newtddata"> 1 </div>
    <div class="newtddata">قبول مرسوله</div>
    <div class="newtddata">باجه معاملاتی شیراز</div>
    <div class="newtddata">09:05:12</div>
  </div>
  <div class="row"><div class="col-12 newtdheader">پنجشنبه 26 تیر ماه 1404</div></div>
  <div class="row newrowdata">
    <div class="newtddata">3</div>
    <div class="newtddata">تحویل گیرنده شد</div>
    <div class="newtddata"></div>
    <div class="newtddata">11:45:00</div>
  </div>
</div>
</body></html>
"""

NOT_FOUND_HTML = """
<html><body>
<div class="alert alert-warning">اطلاعاتی برای این کد رهگیری یافت نشد</div>
</body></html>
"""


@pytest.fixture
def landing_html():
    return LANDING_HTML


@pytest.fixture
def result_html():
    return RESULT_HTML


@pytest.fixture
def not_found_html():
    return NOT_FOUND_HTML
