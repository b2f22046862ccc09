# vntext/data/accent_placements.py
"""
Wrong -> correct accent placements.

Covers two kinds of problems:
    (1) Differences between the classic tone placement and the newer one
        (e.g. "hoá" vs "hóa").
    (2) Tone marks typed on the wrong vowel, which are plain errors.

Only the lower-case pair is stored; the upper-first and upper-case variants
are derived when the rules are compiled.
"""

ACCENT_PLACEMENTS = (
    ('aì', 'ài'),
    ('aỉ', 'ải'),
    ('aĩ', 'ãi'),
    ('aí', 'ái'),
    ('aị', 'ại'),
    ('aò', 'ào'),
    ('aỏ', 'ảo'),
    ('aõ', 'ão'),
    ('aó', 'áo'),
    ('aọ', 'ạo'),
    ('aù', 'àu'),
    ('aủ', 'ảu'),
    ('aũ', 'ãu'),
    ('aú', 'áu'),
    ('aụ', 'ạu'),
    ('aỳ', 'ày'),
    ('aỷ', 'ảy'),
    ('aỹ', 'ãy'),
    ('aý', 'áy'),
    ('aỵ', 'ạy'),
    ('âù', 'ầu'),
    ('âủ', 'ẩu'),
    ('âũ', 'ẫu'),
    ('âú', 'ấu'),
    ('âụ', 'ậu'),
    ('âỳ', 'ầy'),
    ('âỷ', 'ẩy'),
    ('âỹ', 'ẫy'),
    ('âý', 'ấy'),
    ('âỵ', 'ậy'),
    ('eò', 'èo'),
    ('eỏ', 'ẻo'),
    ('eõ', 'ẽo'),
    ('eó', 'éo'),
    ('eọ', 'ẹo'),
    ('êù', 'ều'),
    ('êủ', 'ểu'),
    ('êũ', 'ễu'),
    ('êú', 'ếu'),
    ('êụ', 'ệu'),
    ('ià', 'ìa'),
    ('iả', 'ỉa'),
    ('iã', 'ĩa'),
    ('iá', 'ía'),
    ('iạ', 'ịa'),
    ('iù', 'ìu'),
    ('iủ', 'ỉu'),
    ('iũ', 'ĩu'),
    ('iú', 'íu'),
    ('iụ', 'ịu'),
    ('oà', 'òa'),
    ('oả', 'ỏa'),
    ('oã', 'õa'),
    ('oá', 'óa'),
    ('oạ', 'ọa'),
    ('oè', 'òe'),
    ('oẻ', 'ỏe'),
    ('oẽ', 'õe'),
    ('oé', 'óe'),
    ('oẹ', 'ọe'),
    ('oì', 'òi'),
    ('oỉ', 'ỏi'),
    ('oĩ', 'õi'),
    ('oí', 'ói'),
    ('oị', 'ọi'),
    ('ôì', 'ồi'),
    ('ôỉ', 'ổi'),
    ('ôĩ', 'ỗi'),
    ('ôí', 'ối'),
    ('ôị', 'ội'),
    ('ơì', 'ời'),
    ('ơỉ', 'ởi'),
    ('ơĩ', 'ỡi'),
    ('ơí', 'ới'),
    ('ơị', 'ợi'),
    ('uà', 'ùa'),
    ('uả', 'ủa'),
    ('uã', 'ũa'),
    ('uá', 'úa'),
    ('uạ', 'ụa'),
    ('ùê', 'uề'),
    ('ủê', 'uể'),
    ('ũê', 'uễ'),
    ('úê', 'uế'),
    ('ụê', 'uệ'),
    ('uì', 'ùi'),
    ('uỉ', 'ủi'),
    ('uĩ', 'ũi'),
    ('uí', 'úi'),
    ('uị', 'ụi'),
    ('ùơ', 'uờ'),
    ('ủơ', 'uở'),
    ('ũơ', 'uỡ'),
    ('úơ', 'uớ'),
    ('ụơ', 'uợ'),
    ('uỳ', 'ùy'),
    ('uỷ', 'ủy'),
    ('uỹ', 'ũy'),
    ('uý', 'úy'),
    ('uỵ', 'ụy'),
    ('ưà', 'ừa'),
    ('ưả', 'ửa'),
    ('ưã', 'ữa'),
    ('ưá', 'ứa'),
    ('ưạ', 'ựa'),
    ('ưì', 'ừi'),
    ('ưỉ', 'ửi'),
    ('ưĩ', 'ữi'),
    ('ưí', 'ứi'),
    ('ưị', 'ựi'),
    ('ưù', 'ừu'),
    ('ưủ', 'ửu'),
    ('ưũ', 'ữu'),
    ('ưú', 'ứu'),
    ('ưụ', 'ựu'),

    ('ìêc', 'iềc'),
    ('ỉêc', 'iểc'),
    ('ĩêc', 'iễc'),
    ('íêc', 'iếc'),
    ('ịêc', 'iệc'),
    ('ìêm', 'iềm'),
    ('ỉêm', 'iểm'),
    ('ĩêm', 'iễm'),
    ('íêm', 'iếm'),
    ('ịêm', 'iệm'),
    ('ìên', 'iền'),
    ('ỉên', 'iển'),
    ('ĩên', 'iễn'),
    ('íên', 'iến'),
    ('ịên', 'iện'),
    ('ìêp', 'iềp'),
    ('ỉêp', 'iểp'),
    ('ĩêp', 'iễp'),
    ('íêp', 'iếp'),
    ('ịêp', 'iệp'),
    ('ìêt', 'iềt'),
    ('ỉêt', 'iểt'),
    ('ĩêt', 'iễt'),
    ('íêt', 'iết'),
    ('ịêt', 'iệt'),
    ('ìêu', 'iều'),
    ('ỉêu', 'iểu'),
    ('ĩêu', 'iễu'),
    ('íêu', 'iếu'),
    ('ịêu', 'iệu'),
    ('iêù', 'iều'),
    ('iêủ', 'iểu'),
    ('iêũ', 'iễu'),
    ('iêú', 'iếu'),
    ('iêụ', 'iệu'),
    ('òac', 'oàc'),
    ('ỏac', 'oảc'),
    ('õac', 'oãc'),
    ('óac', 'oác'),
    ('ọac', 'oạc'),
    ('òai', 'oài'),
    ('ỏai', 'oải'),
    ('õai', 'oãi'),
    ('óai', 'oái'),
    ('ọai', 'oại'),
    ('oaì', 'oài'),
    ('oaỉ', 'oải'),
    ('oaĩ', 'oãi'),
    ('oaí', 'oái'),
    ('oaị', 'oại'),
    ('òan', 'oàn'),
    ('ỏan', 'oản'),
    ('õan', 'oãn'),
    ('óan', 'oán'),
    ('ọan', 'oạn'),
    ('òat', 'oàt'),
    ('ỏat', 'oảt'),
    ('õat', 'oãt'),
    ('óat', 'oát'),
    ('ọat', 'oạt'),
    ('òay', 'oày'),
    ('ỏay', 'oảy'),
    ('õay', 'oãy'),
    ('óay', 'oáy'),
    ('ọay', 'oạy'),
    ('oaỳ', 'oày'),
    ('oaỷ', 'oảy'),
    ('oaỹ', 'oãy'),
    ('oaý', 'oáy'),
    ('oaỵ', 'oạy'),
    ('òăc', 'oằc'),
    ('ỏăc', 'oẳc'),
    ('õăc', 'oẵc'),
    ('óăc', 'oắc'),
    ('ọăc', 'oặc'),
    ('òăn', 'oằn'),
    ('ỏăn', 'oẳn'),
    ('õăn', 'oẵn'),
    ('óăn', 'oắn'),
    ('ọăn', 'oặn'),
    ('òăt', 'oằt'),
    ('ỏăt', 'oẳt'),
    ('õăt', 'oẵt'),
    ('óăt', 'oắt'),
    ('ọăt', 'oặt'),
    ('òen', 'oèn'),
    ('ỏen', 'oẻn'),
    ('õen', 'oẽn'),
    ('óen', 'oén'),
    ('ọen', 'oẹn'),
    ('ùân', 'uần'),
    ('ủân', 'uẩn'),
    ('ũân', 'uẫn'),
    ('úân', 'uấn'),
    ('ụân', 'uận'),
    ('ùât', 'uầt'),
    ('ủât', 'uẩt'),
    ('ũât', 'uẫt'),
    ('úât', 'uất'),
    ('ụât', 'uật'),
    ('ùây', 'uầy'),
    ('ủây', 'uẩy'),
    ('ũây', 'uẫy'),
    ('úây', 'uấy'),
    ('ụây', 'uậy'),
    ('uâỳ', 'uầy'),
    ('uâỷ', 'uẩy'),
    ('uâỹ', 'uẫy'),
    ('uâý', 'uấy'),
    ('uâỵ', 'uậy'),
    ('ùôc', 'uồc'),
    ('ủôc', 'uổc'),
    ('ũôc', 'uỗc'),
    ('úôc', 'uốc'),
    ('ụôc', 'uộc'),
    ('ùôi', 'uồi'),
    ('ủôi', 'uổi'),
    ('ũôi', 'uỗi'),
    ('úôi', 'uối'),
    ('ụôi', 'uội'),
    ('uôì', 'uồi'),
    ('uôỉ', 'uổi'),
    ('uôĩ', 'uỗi'),
    ('uôí', 'uối'),
    ('uôị', 'uội'),
    ('ùôm', 'uồm'),
    ('ủôm', 'uổm'),
    ('ũôm', 'uỗm'),
    ('úôm', 'uốm'),
    ('ụôm', 'uộm'),
    ('ùôn', 'uồn'),
    ('ủôn', 'uổn'),
    ('ũôn', 'uỗn'),
    ('úôn', 'uốn'),
    ('ụôn', 'uộn'),
    ('ùôt', 'uồt'),
    ('ủôt', 'uổt'),
    ('ũôt', 'uỗt'),
    ('úôt', 'uốt'),
    ('ụôt', 'uột'),
    ('ùya', 'uỳa'),
    ('ủya', 'uỷa'),
    ('ũya', 'uỹa'),
    ('úya', 'uýa'),
    ('ụya', 'uỵa'),
    ('uyà', 'uỳa'),
    ('uyả', 'uỷa'),
    ('uyã', 'uỹa'),
    ('uyá', 'uýa'),
    ('uyạ', 'uỵa'),
    ('ùyt', 'uỳt'),
    ('ủyt', 'uỷt'),
    ('ũyt', 'uỹt'),
    ('úyt', 'uýt'),
    ('ụyt', 'uỵt'),
    ('ùyu', 'uỳu'),
    ('ủyu', 'uỷu'),
    ('ũyu', 'uỹu'),
    ('úyu', 'uýu'),
    ('ụyu', 'uỵu'),
    ('uyù', 'uỳu'),
    ('uyủ', 'uỷu'),
    ('uyũ', 'uỹu'),
    ('uyú', 'uýu'),
    ('uyụ', 'uỵu'),
    ('ừơc', 'ườc'),
    ('ửơc', 'ưởc'),
    ('ữơc', 'ưỡc'),
    ('ứơc', 'ước'),
    ('ựơc', 'ược'),
    ('ừơi', 'ười'),
    ('ửơi', 'ưởi'),
    ('ữơi', 'ưỡi'),
    ('ứơi', 'ưới'),
    ('ựơi', 'ượi'),
    ('ươì', 'ười'),
    ('ươỉ', 'ưởi'),
    ('ươĩ', 'ưỡi'),
    ('ươí', 'ưới'),
    ('ươị', 'ượi'),
    ('ừơm', 'ườm'),
    ('ửơm', 'ưởm'),
    ('ữơm', 'ưỡm'),
    ('ứơm', 'ướm'),
    ('ựơm', 'ượm'),
    ('ừơn', 'ườn'),
    ('ửơn', 'ưởn'),
    ('ữơn', 'ưỡn'),
    ('ứơn', 'ướn'),
    ('ựơn', 'ượn'),
    ('ừơp', 'ườp'),
    ('ửơp', 'ưởp'),
    ('ữơp', 'ưỡp'),
    ('ứơp', 'ướp'),
    ('ựơp', 'ượp'),
    ('ừơt', 'ườt'),
    ('ửơt', 'ưởt'),
    ('ữơt', 'ưỡt'),
    ('ứơt', 'ướt'),
    ('ựơt', 'ượt'),
    ('ừơu', 'ườu'),
    ('ửơu', 'ưởu'),
    ('ữơu', 'ưỡu'),
    ('ứơu', 'ướu'),
    ('ựơu', 'ượu'),
    ('ươù', 'ườu'),
    ('ươủ', 'ưởu'),
    ('ươũ', 'ưỡu'),
    ('ươú', 'ướu'),
    ('ươụ', 'ượu'),
    ('ỳên', 'yền'),
    ('ỷên', 'yển'),
    ('ỹên', 'yễn'),
    ('ýên', 'yến'),
    ('ỵên', 'yện'),
    ('ỳêt', 'yềt'),
    ('ỷêt', 'yểt'),
    ('ỹêt', 'yễt'),
    ('ýêt', 'yết'),
    ('ỵêt', 'yệt'),
    ('ỳêu', 'yều'),
    ('ỷêu', 'yểu'),
    ('ỹêu', 'yễu'),
    ('ýêu', 'yếu'),
    ('ỵêu', 'yệu'),
    ('yêù', 'yều'),
    ('yêủ', 'yểu'),
    ('yêũ', 'yễu'),
    ('yêú', 'yếu'),
    ('yêụ', 'yệu'),

    ('ìêng', 'iềng'),
    ('ỉêng', 'iểng'),
    ('ĩêng', 'iễng'),
    ('íêng', 'iếng'),
    ('ịêng', 'iệng'),
    ('òang', 'oàng'),
    ('ỏang', 'oảng'),
    ('õang', 'oãng'),
    ('óang', 'oáng'),
    ('ọang', 'oạng'),
    ('òanh', 'oành'),
    ('ỏanh', 'oảnh'),
    ('õanh', 'oãnh'),
    ('óanh', 'oánh'),
    ('ọanh', 'oạnh'),
    ('òăng', 'oằng'),
    ('ỏăng', 'oẳng'),
    ('õăng', 'oẵng'),
    ('óăng', 'oắng'),
    ('ọăng', 'oặng'),
    ('òong', 'oòng'),
    ('ỏong', 'oỏng'),
    ('õong', 'oõng'),
    ('óong', 'oóng'),
    ('ọong', 'oọng'),
    ('ùâng', 'uầng'),
    ('ủâng', 'uẩng'),
    ('ũâng', 'uẫng'),
    ('úâng', 'uấng'),
    ('ụâng', 'uậng'),
    ('ùông', 'uồng'),
    ('ủông', 'uổng'),
    ('ũông', 'uỗng'),
    ('úông', 'uống'),
    ('ụông', 'uộng'),
    ('ùyên', 'uyền'),
    ('ủyên', 'uyển'),
    ('ũyên', 'uyễn'),
    ('úyên', 'uyến'),
    ('ụyên', 'uyện'),
    ('uỳên', 'uyền'),
    ('uỷên', 'uyển'),
    ('uỹên', 'uyễn'),
    ('uýên', 'uyến'),
    ('uỵên', 'uyện'),
    ('ùyêt', 'uyềt'),
    ('ủyêt', 'uyểt'),
    ('ũyêt', 'uyễt'),
    ('úyêt', 'uyết'),
    ('ụyêt', 'uyệt'),
    ('uỳêt', 'uyềt'),
    ('uỷêt', 'uyểt'),
    ('uỹêt', 'uyễt'),
    ('uýêt', 'uyết'),
    ('uỵêt', 'uyệt'),
    ('ùynh', 'uỳnh'),
    ('ủynh', 'uỷnh'),
    ('ũynh', 'uỹnh'),
    ('úynh', 'uýnh'),
    ('ụynh', 'uỵnh'),
    ('ừơng', 'ường'),
    ('ửơng', 'ưởng'),
    ('ữơng', 'ưỡng'),
    ('ứơng', 'ướng'),
    ('ựơng', 'ượng'),
)

__all__ = ['ACCENT_PLACEMENTS']
