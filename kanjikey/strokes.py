"""Residual stroke counts: strokes of a kanji beyond those of its radical."""

from itertools import chain

# One row per radical. Each entry is the residual stroke count of a sort key,
# in sort-key order: the first key of a radical is the radical itself (0).
_COUNTS_BY_RADICAL = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12),  # 一
    (0, 1, 2, 4, 5, 6),  # 二
    (0, 1, 2, 4, 5, 6, 7, 8, 11),  # 亠
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16),  # 人
    (0, 2, 3, 4, 5, 6, 8, 9),  # 儿
    (0, 2, 4, 6),  # 入
    (0, 2, 4, 5, 6, 8),  # 八
    (0, 2, 3, 4, 7),  # 冂
    (0, 2, 3, 7, 8, 9),  # 冖
    (0, 3, 4, 5, 6, 8, 13, 14),  # 冫
    (0, 1, 3, 4, 9, 10),  # 几
    (0, 2, 3, 6),  # 凵
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 13, 14),  # 刀
    (0, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13),  # 力
    (0, 1, 2, 3, 4, 7, 9),  # 勹
    (0, 2, 3, 9),  # 匕
    (0, 2, 3, 4, 5, 8, 9, 11, 12, 13),  # 匸
    (0, 1, 2, 3, 4, 6, 7, 10),  # 十
    (0, 3, 6),  # 卜
    (0, 3, 4, 5, 6, 7, 8),  # 卩
    (0, 2, 7, 8, 10, 12),  # 厂
    (0, 3, 6, 9),  # 厶
    (0, 1, 2, 6, 7, 14, 16),  # 又
    (0, 5, 6, 8, 9, 14),  # ⺍
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 17, 18, 19, 21),  # 口
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11),  # 囗
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 16),  # 土
    (0, 1, 3, 4, 8, 9, 11),  # 士
    (0, 6, 7),  # 夂
    (0, 2, 3, 5, 8, 10, 11),  # 夕
    (0, 1, 2, 3, 4, 5, 6, 7, 9, 10, 11, 13),  # 大
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14),  # 女
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 13, 14, 16, 19),  # 子
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 16, 17),  # 宀
    (0, 3, 4, 6, 7, 8, 9, 11, 12),  # 寸
    (0, 1, 3, 5),  # 小
    (0, 1, 5, 9),  # 尢
    (0, 1, 2, 3, 4, 5, 6, 7, 9, 11, 12, 18),  # 尸
    (0, 1),  # 屮
    (0, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 14, 17, 20),  # 山
    (0, 3),  # 川
    (0, 2, 4, 7),  # 工
    (0, 1, 6, 9),  # 己
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 14),  # 巾
    (0, 2, 3, 5, 10),  # 干
    (0, 1, 2, 6, 9),  # 幺
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 16, 22),  # 广
    (0, 4, 5, 6),  # 廴
    (0, 1, 2, 4, 12),  # 廾
    (0, 1, 3),  # 弋
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 12, 13, 14, 19),  # 弓
    (0, 8, 10),  # 彐
    (0, 4, 6, 8, 9, 11, 12),  # 彡
    (0, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13),  # 彳
    (0, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 16, 17, 18, 19),  # 心
    (0, 1, 2, 3, 4, 7, 8, 9, 10, 11, 12, 13),  # 戈
    (0, 3, 4, 5, 6, 7, 8),  # 戸
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 17, 18, 19, 20),  # 手
    (0,),  # 支
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14),  # 攴
    (0, 8),  # 文
    (0, 6, 7, 10),  # 斗
    (0, 1, 4, 7, 8, 9, 14),  # 斤
    (0, 4, 5, 6, 7, 10, 14),  # 方
    (0, 5),  # 无
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),  # 日
    (0, 2, 4, 6, 7, 8, 13, 16),  # 月
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17, 19, 21),  # 木
    (0, 2, 4, 7, 8, 10, 11, 13, 17),  # 欠
    (0, 1, 2, 3, 4, 5, 9, 10, 12, 14),  # 止
    (0, 2, 5, 6, 8, 14, 17),  # 歹
    (0, 4, 5, 6, 7, 9, 11),  # 殳
    (0, 2, 4),  # 母
    (0, 5),  # 比
    (0, 4, 7, 8),  # 毛
    (0, 1),  # 氏
    (0, 2, 6),  # 气
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17, 19, 22),  # 水
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 17),  # 火
    (0, 4, 8, 13),  # 爪
    (0, 9),  # 父
    (0, 7, 10),  # 爻
    (0,),  # 爿
    (0, 4, 8, 9),  # 片
    (0,),  # 牙
    (0, 2, 3, 4, 5, 6, 7, 8, 13),  # 牛
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 16),  # 犬
    (0, 6),  # 玄
    (0, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 14),  # 玉
    (0, 11),  # 瓜
    (0, 6, 11, 13),  # 瓦
    (0, 4, 6),  # 甘
    (0, 6, 7),  # 生
    (0, 2),  # 用
    (0, 2, 3, 4, 5, 6, 7, 8, 10, 14),  # 田
    (0, 7, 9),  # 疋
    (0, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 16, 17, 19),  # 疒
    (0, 4, 7),  # 癶
    (0, 1, 3, 4, 5, 6, 7),  # 白
    (0, 10),  # 皮
    (0, 3, 4, 5, 6, 8, 9, 10, 11, 12),  # 皿
    (0, 3, 4, 5, 6, 8, 9, 10, 11, 12, 13),  # 目
    (0, 4),  # 矛
    (0, 3, 4, 5, 7, 8, 12),  # 矢
    (0, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),  # 石
    (0, 1, 3, 4, 5, 6, 7, 8, 9, 12, 13, 14),  # 示
    (0, 4, 8),  # 禸
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 14),  # 禾
    (0, 2, 3, 4, 5, 6, 8, 9, 10, 11, 12, 13, 16),  # 穴
    (0, 5, 6, 7, 9, 15),  # 立
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17),  # 竹
    (0, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12),  # 米
    (0, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),  # 糸
    (0, 4),  # 缶
    (0, 5, 8, 9, 10, 11, 14),  # 网
    (0, 3, 5, 6, 7, 13),  # 羊
    (0, 4, 5, 6, 8, 9, 10, 11, 12, 14),  # 羽
    (0, 2, 4),  # 老
    (0, 3),  # 而
    (0, 4),  # 耒
    (0, 3, 4, 5, 7, 8, 11, 12, 16),  # 耳
    (0, 7, 8),  # 聿
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 18),  # 肉
    (0, 2, 11),  # 臣
    (0, 3),  # 自
    (0, 4, 8),  # 至
    (0, 6, 7, 9, 11),  # 臼
    (0, 4, 6, 9, 10),  # 舌
    (0, 6, 8),  # 舛
    (0, 4, 5, 7, 9, 13, 15),  # 舟
    (0, 1, 11),  # 艮
    (0, 13),  # 色
    (0, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16),  # 艸
    (0, 2, 3, 4, 5, 6, 7, 8),  # 虍
    (0, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 18, 19),  # 虫
    (0, 6),  # 血
    (0, 3, 5, 6, 7, 9, 10),  # 行
    (0, 2, 4, 5, 6, 7, 8, 9, 10, 11, 13, 14, 16, 17),  # 衣
    (0, 3, 12, 13),  # 西
    (0, 4, 5, 8, 9, 10, 11, 13, 17),  # 見
    (0, 6, 13, 16),  # 角
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17),  # 言
    (0,),  # 谷
    (0, 6, 21),  # 豆
    (0, 4, 5, 7, 9),  # 豕
    (0, 3, 5, 7),  # 豸
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 15),  # 貝
    (0, 4, 7),  # 赤
    (0, 2, 3, 5, 7, 8, 10),  # 走
    (0, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16),  # 足
    (0, 3, 4, 5, 8, 9),  # 身
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 15, 16),  # 車
    (0, 6, 7, 9),  # 辛
    (0, 3, 6),  # 辰
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 19),  # 辵
    (0, 4, 5, 6, 7, 8, 11, 12),  # 邑
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13),  # 酉
    (0, 4, 5, 13),  # 釆
    (0, 2, 4, 5),  # 里
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 19, 20),  # 金
    (0,),  # 長
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13),  # 門
    (0, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 14),  # 阜
    (0, 8),  # 隶
    (0, 2, 3, 4, 5, 6, 8, 9, 10, 11),  # 隹
    (0, 3, 4, 5, 6, 7, 8, 9, 11, 12, 13, 14, 16),  # 雨
    (0, 5, 6, 8),  # 青
    (0, 7, 11),  # 非
    (0,),  # 面
    (0, 3, 4, 5, 6, 7, 8, 9, 13),  # 革
    (0, 8, 10),  # 韋
    (0, 3),  # 韭
    (0, 5, 10, 11),  # 音
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 14, 15),  # 頁
    (0, 3, 5, 11),  # 風
    (0,),  # 飛
    (0, 2, 4, 5, 6, 7, 8, 10, 11, 12, 13),  # 食
    (0,),  # 首
    (0, 9, 11),  # 香
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 16, 19),  # 馬
    (0, 6, 9, 11, 13),  # 骨
    (0,),  # 高
    (0, 4, 5, 6, 8, 11, 12, 14),  # 髟
    (0, 6),  # 鬥
    (0, 19),  # 鬯
    (0,),  # 鬲
    (0, 4, 5, 8, 11),  # 鬼
    (0, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 16),  # 魚
    (0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 13, 17, 19),  # 鳥
    (0, 8),  # 鹵
    (0, 8, 12),  # 鹿
    (0, 4, 8, 9),  # 麦
    (0, 3, 7),  # 麻
    (0,),  # 黄
    (0, 3, 5, 11),  # 黍
    (0, 3, 5, 11),  # 黒
    (0,),  # 黹
    (0, 12),  # 黽
    (0,),  # 鼎
    (0,),  # 鼓
    (0, 5),  # 鼠
    (0,),  # 鼻
    (0, 3, 7),  # 斉
    (0, 2, 5, 6, 7),  # 齒
    (0,),  # 龍
    (0,),  # 龜
    (0,),  # 龠
)

_COUNTS = tuple(chain.from_iterable(_COUNTS_BY_RADICAL))


def residual_stroke_count_from_rsc_sort_key(rsc_sort_key):
    """Residual stroke count for a radical+stroke-count sort key (1-based)."""
    index = rsc_sort_key - 1
    if not 0 <= index < len(_COUNTS):
        raise ValueError(
            f"rsc sort key out of range: {rsc_sort_key} (1..{len(_COUNTS)})"
        )
    return _COUNTS[index]


def residual_stroke_count(entry):
    """Residual stroke count of a kanji entry, read from its ``rsc_sort_key``."""
    return residual_stroke_count_from_rsc_sort_key(entry.rsc_sort_key)


def largest_residual_stroke_count():
    """The largest residual stroke count of any sort key."""
    return max(_COUNTS)