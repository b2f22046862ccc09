# vntext/data/i_or_y.py
"""
Rules for choosing between "i" and "y" at the end of a syllable.

Rules are grouped by the letter they restore ('i' first, then 'y') and by
tier, applied in the order: only, major, fix.

Each entry is (wrong, right, boundable). A boundable rule may appear inside
another word (e.g. "hì" inside "hình"), so it must only be replaced where it
stands as a whole word. Non-boundable rules are safe as plain substring
replacement.

Only the lower-case pair is stored; the upper-first and upper-case variants
are derived when the rules are compiled.
"""

from types import MappingProxyType


I_OR_Y = MappingProxyType({
    'i': {
        'only': (
            ('by', 'bi', False),
            ('bỳ', 'bì', False),
            ('bỷ', 'bỉ', False),
            ('bỹ', 'bĩ', False),
            ('bý', 'bí', False),
            ('bỵ', 'bị', False),
            ('chy', 'chi', False),
            ('chỳ', 'chì', False),
            ('chỷ', 'chỉ', False),
            ('chỹ', 'chĩ', False),
            ('chý', 'chí', False),
            ('chỵ', 'chị', False),
            ('dy', 'di', False),
            ('dỳ', 'dì', False),
            ('dỷ', 'dỉ', False),
            ('dỹ', 'dĩ', False),
            ('dý', 'dí', False),
            ('dỵ', 'dị', False),
            ('đy', 'đi', False),
            ('đỳ', 'đì', False),
            ('đỷ', 'đỉ', False),
            ('đỹ', 'đĩ', False),
            ('đý', 'đí', False),
            ('đỵ', 'đị', False),
            ('ghy', 'ghi', False),
            ('ghỳ', 'ghì', False),
            ('ghỷ', 'ghỉ', False),
            ('ghỹ', 'ghĩ', False),
            ('ghý', 'ghí', False),
            ('ghỵ', 'ghị', False),
            ('gỳ', 'gì', False),
            ('gỷ', 'gỉ', False),
            ('gỹ', 'gĩ', False),
            ('gý', 'gí', False),
            ('gỵ', 'gị', False),
            ('hỳ', 'hì', False),
            ('hỹ', 'hĩ', False),
            ('hỵ', 'hị', False),
            ('khy', 'khi', False),
            ('khỳ', 'khì', False),
            ('khỷ', 'khỉ', False),
            ('khỹ', 'khĩ', False),
            ('khý', 'khí', False),
            ('khỵ', 'khị', False),
            ('ky', 'ki', False),
            ('lỳ', 'lì', False),
            ('lỹ', 'lĩ', False),
            ('mỷ', 'mỉ', False),
            ('mý', 'mí', False),
            ('nghy', 'nghi', False),
            ('nghỳ', 'nghì', False),
            ('nghỷ', 'nghỉ', False),
            ('nghỹ', 'nghĩ', False),
            ('nghý', 'nghí', False),
            ('nghỵ', 'nghị', False),
            ('nhy', 'nhi', False),
            ('nhỳ', 'nhì', False),
            ('nhỷ', 'nhỉ', False),
            ('nhỹ', 'nhĩ', False),
            ('nhý', 'nhí', False),
            ('nhỵ', 'nhị', False),
            ('ny', 'ni', False),
            ('nỳ', 'nì', False),
            ('nỷ', 'nỉ', False),
            ('nỹ', 'nĩ', False),
            ('ný', 'ní', False),
            ('nỵ', 'nị', False),
            ('oy', 'oi', False),
            ('òy', 'òi', False),
            ('ỏy', 'ỏi', False),
            ('õy', 'õi', False),
            ('óy', 'ói', False),
            ('ọy', 'ọi', False),
            ('ôy', 'ôi', False),
            ('ồy', 'ồi', False),
            ('ổy', 'ổi', False),
            ('ỗy', 'ỗi', False),
            ('ốy', 'ối', False),
            ('ộy', 'ội', False),
            ('ơy', 'ơi', False),
            ('ờy', 'ời', False),
            ('ởy', 'ởi', False),
            ('ỡy', 'ỡi', False),
            ('ớy', 'ới', False),
            ('ợy', 'ợi', False),
            ('phy', 'phi', False),
            ('phỳ', 'phì', False),
            ('phỷ', 'phỉ', False),
            ('phỹ', 'phĩ', False),
            ('phý', 'phí', False),
            ('phỵ', 'phị', False),
            ('ry', 'ri', False),
            ('rỳ', 'rì', False),
            ('rỷ', 'rỉ', False),
            ('rỹ', 'rĩ', False),
            ('rý', 'rí', False),
            ('rỵ', 'rị', False),
            ('sỳ', 'sì', False),
            ('sỷ', 'sỉ', False),
            ('thy', 'thi', False),
            ('thỳ', 'thì', False),
            ('thỷ', 'thỉ', False),
            ('thỹ', 'thĩ', False),
            ('thý', 'thí', False),
            ('thỵ', 'thị', False),
            ('try', 'tri', False),
            ('trỳ', 'trì', False),
            ('trỷ', 'trỉ', False),
            ('trỹ', 'trĩ', False),
            ('trý', 'trí', False),
            ('trỵ', 'trị', False),
            ('tỹ', 'tĩ', False),
            ('ưy', 'ưi', False),
            ('ừy', 'ừi', False),
            ('ửy', 'ửi', False),
            ('ữy', 'ữi', False),
            ('ứy', 'ứi', False),
            ('ựy', 'ựi', False),
            ('vy', 'vi', False),
            ('vỳ', 'vì', False),
            ('vỷ', 'vỉ', False),
            ('vỹ', 'vĩ', False),
            ('vý', 'ví', False),
            ('vỵ', 'vị', False),
            ('xy', 'xi', False),
            ('xỳ', 'xì', False),
            ('xỷ', 'xỉ', False),
            ('xỹ', 'xĩ', False),
            ('xý', 'xí', False),
            ('xỵ', 'xị', False),
        ),
        'major': (
            ('my', 'mi', False),
            ('mỳ', 'mì', False),
            ('tý', 'tí', False),
            ('tỵ', 'tị', False),
        ),
        'fix': (
            ('tu mi', 'tu my', False),
            ('nga mi', 'nga my', False),
            ('Nga Mi', 'Nga My', False),
            ('nhu mì', 'nhu mỳ', False),
            ('tuổi Tí', 'tuổi Tý', False),
            ('Canh Tí', 'Canh Tý', False),
            ('Nhâm Tí', 'Nhâm Tý', False),
            ('Giáp Tí', 'Giáp Tý', False),
            ('Bính Tí', 'Bính Tý', False),
            ('Mậu Tí', 'Mậu Tý', False),
        ),
    },
    'y': {
        'only': (
            ('âi', 'ây', False),
            ('ầi', 'ầy', False),
            ('ẩi', 'ẩy', False),
            ('ẫi', 'ẫy', False),
            ('ấi', 'ấy', False),
            ('ậi', 'ậy', False),
            ('kỉ', 'kỷ', True),  # e.g. lỉnh kỉnh
            ('mĩ', 'mỹ', True),  # e.g. mũm mĩm
            ('qui', 'quy', False),
            ('quì', 'quỳ', False),
            ('quỉ', 'quỷ', False),
            ('quĩ', 'quỹ', False),
            ('quí', 'quý', False),
            ('quị', 'quỵ', False),
            ('sĩ', 'sỹ', False),
        ),
        'major': (
            ('hi', 'hy', True),  # e.g. Him Lam
            ('hỉ', 'hỷ', True),  # e.g. thỉnh cầu
            ('hí', 'hý', True),  # e.g. hít hà
            ('kì', 'kỳ', True),  # e.g. kình ngư
            ('kĩ', 'kỹ', False),
            ('kí', 'ký', True),  # e.g. kín đáo
            ('kị', 'kỵ', True),  # e.g. đen kịt
            ('li', 'ly', True),  # e.g. thần linh
            ('lí', 'lý', True),  # e.g. quân lính
            ('lị', 'lỵ', True),  # e.g. lia lịa
            ('mị', 'mỵ', True),  # e.g. mịn màng
            ('si', 'sy', True),  # e.g. sinh đẻ
            ('sỉ', 'sỷ', False),
            ('ti', 'ty', True),  # e.g. tinh thần
            ('tì', 'tỳ', True),  # e.g. tình yêu
            ('tỉ', 'tỷ', True),  # e.g. tỉnh thành
            ('tị', 'tỵ', True),  # e.g. tịt ngòi
        ),
        'fix': (
            ('hy hy', 'hi hi', False),
            ('hý hý', 'hí hí', False),
            ('hý húi', 'hí húi', False),
            ('hý ha', 'hí ha', False),
            ('hý hửng', 'hí hửng', False),
            ('hý hởn', 'hí hởn', False),
            ('ti hý', 'ti hí', False),
            ('ty hý', 'ti hí', False),  # Fix combo: +ti
            ('hỷ mũi', 'hỉ mũi', False),
            ('hủ hỷ', 'hủ hỉ', False),
            ('hỷ hả', 'hỉ hả', False),
            ('ký đầu', 'kí đầu', False),
            ('ký mỏ', 'kí mỏ', False),
            ('ký lô', 'kí lô', False),
            ('mấy ký', 'mấy kí', False),
            ('nhiêu ký', 'nhiêu kí', False),
            ('kỳ cọ', 'kì cọ', False),
            ('kỳ kèo', 'kì kèo', False),
            ('kỳ đà', 'kì đà', False),
            ('kỳ nhông', 'kì nhông', False),
            ('kỳ cùng', 'kì cùng', False),
            ('cũ kỹ', 'cũ kĩ', False),
            ('kỹ càng', 'kĩ càng', False),
            ('kỹ tính', 'kĩ tính', False),
            ('kỹ lưỡng', 'kĩ lưỡng', False),
            ('kỹ chưa', 'kĩ chưa', False),
            ('kỹ vào', 'kĩ vào', False),
            ('kỹ vô', 'kĩ vô', False),
            ('kỹ quá', 'kĩ quá', False),
            ('thật kỹ', 'thật kĩ', False),
            ('cụ kỵ', 'cụ kị', False),
            ('cu ly', 'cu li', False),
            ('culi', 'cu li', False),
            ('culy', 'cu li', False),
            ('cu-li', 'cu li', False),
            ('cu-ly', 'cu li', False),
            ('va ly', 'va li', False),
            ('vali', 'va li', False),
            ('valy', 'va li', False),
            ('va-li', 'va li', False),
            ('va-ly', 'va li', False),
            ('ly ti', 'li ti', False),
            ('ly ty', 'li ti', False),  # Fix combo: +ti
            ('chi ly', 'chi li', False),
            ('ly bì', 'li bì', False),
            ('lâm ly', 'lâm li', False),
            ('lý nhí', 'lí nhí', False),
            ('lý lắc', 'lí lắc', False),
            ('kiết lỵ', 'kiết lị', False),
            ('mụ mỵ', 'mụ mị', False),
            ('cây sy', 'cây si', False),
            ('nốt sy', 'nốt si', False),
            ('mua sỷ', 'mua sỉ', False),
            ('bán sỷ', 'bán sỉ', False),
            ('sỷ lẻ', 'sỉ lẻ', False),
            ('sỷ số', 'sỉ số', False),
            ('buôn sỷ', 'buôn sỉ', False),
            ('giá sỷ', 'giá sỉ', False),
            ('lấy sỷ', 'lấy sỉ', False),
            ('hàng sỷ', 'hàng sỉ', False),
            ('sờ ty', 'sờ ti', False),
            ('ty mẹ', 'ti mẹ', False),
            ('ty vợ', 'ti vợ', False),
            ('đầu ty', 'đầu ti', False),
            ('ty toe', 'ti toe', False),
            ('đinh ty', 'đinh ti', False),
            ('ty trôn', 'ti trôn', False),
            ('tí ty', 'tí ti', False),
            ('ty tỉ', 'ti tỉ', False),
            ('ty tỷ', 'ti tỉ', False),  # Fix combo: +tỉ
            ('ty tiện', 'ti tiện', False),
            ('tỳ đè', 'tì đè', False),
            ('tỳ lên', 'tì lên', False),
            ('tỳ vào', 'tì vào', False),
            ('tỳ hằn', 'tì hằn', False),
            ('tỳ vết', 'tì vết', False),
            ('tù tỳ', 'tù tì', False),
            ('tỳ tỳ', 'tì tì', False),
            ('tỷ mỉ', 'tỉ mỉ', False),
            ('tỷ tê', 'tỉ tê', False),
            ('tỷ phú', 'tỉ phú', False),
            ('tiền tỷ', 'tiền tỉ', False),
            ('bạc tỷ', 'bạc tỉ', False),
            ('tỷ đồng', 'tỉ đồng', False),
            ('tỷ đô', 'tỉ đô', False),
            ('tỷ thứ', 'tỉ thứ', False),
            ('tuổi Tị', 'tuổi Tỵ', False),
            ('Đinh Tị', 'Đinh Tỵ', False),
            ('Kỷ Tị', 'Kỷ Tỵ', False),
            ('Tân Tị', 'Tân Tỵ', False),
            ('Quý Tị', 'Quý Tỵ', False),
            ('Ất Tị', 'Ất Tỵ', False),
        ),
    },
})

__all__ = ['I_OR_Y']
